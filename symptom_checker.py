from database import fetch_all, fetch_one
from records import symptom_from_row

SYMPTOM_COLUMNS = """
    id, name, severity, description, common_causes, recommendations,
    when_to_see_doctor, related_remedies
"""


# Symptom Checker (Rule-Based)
class SymptomChecker:
    related_remedy_limit = 6

    @staticmethod
    def normalize(names):
        """Lower-case and trim names. Repeats are kept and each one is tallied."""
        return [name.strip().lower() for name in names if isinstance(name, str) and name.strip()]

    @staticmethod
    def severity_breakdown(symptoms):
        counts = {}
        for symptom in symptoms:
            counts[symptom['severity']] = counts.get(symptom['severity'], 0) + 1
        return counts

    @staticmethod
    def overall_severity(counts):
        if counts.get('critical', 0) > 0 or counts.get('high', 0) > 0:
            return 'high'
        if counts.get('medium', 0) > 0:
            return 'medium'
        return 'low'

    @staticmethod
    def related_remedy_ids(symptoms):
        ids = []
        for symptom in symptoms:
            for remedy_id in symptom.get('related_remedies') or []:
                if remedy_id not in ids:
                    ids.append(remedy_id)
        return ids

    def lookup(self, conn, names):
        found, unmatched = [], []
        for name in self.normalize(names):
            row = fetch_one(
                conn,
                f"SELECT {SYMPTOM_COLUMNS} FROM symptoms WHERE name = ?",
                (name,)
            )
            if row:
                found.append(symptom_from_row(row))
            else:
                unmatched.append(name)
        return found, unmatched

    def related_remedies(self, conn, remedy_ids):
        if not remedy_ids:
            return []
        placeholders = ','.join('?' for _ in remedy_ids)
        rows = fetch_all(
            conn,
            f"""
            SELECT id, title, description, category, rating, prep_time, image
            FROM remedies
            WHERE id IN ({placeholders})
            ORDER BY rating DESC
            LIMIT ?
            """,
            (*remedy_ids, self.related_remedy_limit)
        )
        for row in rows:
            row['rating'] = float(row['rating'])
        return rows

    def analyze(self, conn, names):
        """
        Look up each named symptom and tally severities. Returns None when no
        name matched a known symptom.
        """
        symptoms, unmatched = self.lookup(conn, names)
        if not symptoms:
            return None

        counts = self.severity_breakdown(symptoms)
        remedies = self.related_remedies(conn, self.related_remedy_ids(symptoms))

        return {
            'analyzed_symptoms': symptoms,
            'overall_severity': self.overall_severity(counts),
            'severity_breakdown': counts,
            'related_remedies': remedies,
            'recommendations': {
                'immediate_actions': [s for s in symptoms if s['severity'] in ('high', 'critical')],
                'general_care': [s for s in symptoms if s['severity'] in ('low', 'medium')],
            },
            'unmatched': unmatched,
        }


# Initialize symptom checker
symptom_checker = SymptomChecker()
