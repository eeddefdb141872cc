class AlertManager:
    def __init__(self):
        self.critical_keywords = [
            'heart attack', 'chest pain', 'stroke', 'cannot breathe', "can't breathe",
            'difficulty breathing', 'not breathing', 'bleeding heavily', 'severe bleeding',
            'unconscious', 'suicide', 'kill myself', 'self harm', 'seizure',
            'choking', 'overdose', 'anaphylaxis'
        ]

        self.urgent_keywords = [
            'high fever', 'broken bone', 'severe headache', 'allergic reaction',
            'burn', 'poison', 'severe vomiting', 'severe diarrhea', 'deep cut',
            'head injury', 'fainted'
        ]

    def analyze(self, message):
        """Return alert details for emergency phrases, or None"""
        if not message:
            return None
        text = message.lower()

        for keyword in self.critical_keywords:
            if keyword in text:
                return {
                    "alert_level": "CRITICAL",
                    "matched": keyword,
                    "suggested_action": "IMMEDIATE_MEDICAL_ATTENTION"
                }

        for keyword in self.urgent_keywords:
            if keyword in text:
                return {
                    "alert_level": "URGENT",
                    "matched": keyword,
                    "suggested_action": "SEEK_MEDICAL_ADVICE_SOON"
                }

        return None


# Create a global instance
alert_manager = AlertManager()
