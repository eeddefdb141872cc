from database import execute, get_db
from records import encode_json

# Sample content shipped with the app
REMEDIES = [
    {
        "id": "honey-cough",
        "title": "Honey for Cough",
        "description": "Natural cough suppressant that soothes throat irritation and reduces coughing.",
        "category": "Respiratory",
        "difficulty": "easy",
        "rating": 4.8,
        "prep_time": "2 minutes",
        "ingredients": ["1-2 tsp Raw Honey", "1 cup Warm Water (optional)", "Lemon juice (optional)"],
        "instructions": [
            "Take 1-2 teaspoons of raw honey directly",
            "Allow it to coat your throat for relief",
            "Repeat every 2-3 hours as needed",
            "For enhanced effect, mix with warm water and lemon"
        ],
        "benefits": "Soothes throat, reduces coughing, natural antibacterial properties",
        "warnings": "Not suitable for children under 1 year",
        "image": "🍯"
    },
    {
        "id": "turmeric-milk",
        "title": "Turmeric Golden Milk",
        "description": "Anti-inflammatory drink that boosts immunity and reduces inflammation.",
        "category": "Immunity",
        "difficulty": "easy",
        "rating": 4.7,
        "prep_time": "5 minutes",
        "ingredients": ["1 tsp Turmeric powder", "1 cup Milk (or plant milk)", "1 tsp Honey",
                        "Pinch of black pepper", "1/2 tsp Ginger powder"],
        "instructions": [
            "Heat milk in a saucepan over medium heat",
            "Add turmeric, ginger, and black pepper",
            "Stir well and bring to a gentle boil",
            "Reduce heat and simmer for 2-3 minutes",
            "Remove from heat and add honey",
            "Strain and drink warm before bed"
        ],
        "benefits": "Anti-inflammatory, immune boosting, improves sleep quality",
        "warnings": "May interact with blood thinners",
        "image": "🥛"
    },
    {
        "id": "ginger-tea",
        "title": "Ginger Tea",
        "description": "Digestive aid that relieves nausea, cold symptoms, and improves circulation.",
        "category": "Digestion",
        "difficulty": "easy",
        "rating": 4.9,
        "prep_time": "10 minutes",
        "ingredients": ["1 inch Fresh ginger root", "2 cups Water", "1-2 tsp Honey", "Lemon slice (optional)"],
        "instructions": [
            "Peel and slice fresh ginger root",
            "Boil water in a saucepan",
            "Add ginger slices and simmer for 5-10 minutes",
            "Strain the tea into a cup",
            "Add honey and lemon to taste",
            "Drink warm for best results"
        ],
        "benefits": "Relieves nausea, aids digestion, boosts immunity, reduces inflammation",
        "warnings": "Avoid during pregnancy if you have a history of miscarriage",
        "image": "🫖"
    },
    {
        "id": "aloe-vera-burns",
        "title": "Aloe Vera for Burns",
        "description": "Natural cooling agent that heals minor burns and soothes skin irritation.",
        "category": "Skin",
        "difficulty": "easy",
        "rating": 4.6,
        "prep_time": "2 minutes",
        "ingredients": ["Fresh aloe vera leaf", "Clean water"],
        "instructions": [
            "Cut a fresh aloe vera leaf",
            "Extract the gel from inside the leaf",
            "Apply the gel directly to the burn",
            "Leave it on for 15-20 minutes",
            "Rinse with cool water",
            "Repeat 2-3 times daily"
        ],
        "benefits": "Cooling effect, promotes healing, reduces inflammation, prevents infection",
        "warnings": "Only for minor burns, seek medical help for serious burns",
        "image": "🌿"
    },
]

FIRST_AID = [
    {
        "id": "burns",
        "title": "Burns Treatment",
        "category": "wounds",
        "emergency": 0,
        "description": "First aid for thermal, chemical, or electrical burns",
        "steps": [
            "Remove the person from the source of the burn",
            "Cool the burn with cool running water for 10-15 minutes",
            "Remove jewelry or tight clothing near the burn area",
            "Cover the burn with a sterile, non-adhesive bandage",
            "Do not apply ice, butter, or ointments to severe burns",
            "Seek medical attention for burns larger than 3 inches"
        ],
        "warnings": "Never break blisters or remove clothing stuck to the burn. "
                    "For chemical burns, call poison control immediately.",
        "severity": "medium"
    },
    {
        "id": "choking",
        "title": "Choking (Heimlich Maneuver)",
        "category": "respiratory",
        "emergency": 1,
        "description": "Emergency procedure to clear airway obstruction",
        "steps": [
            "Ask 'Are you choking?' - if they can speak, encourage coughing",
            "Stand behind the person and wrap your arms around their waist",
            "Make a fist with one hand and place it above the navel",
            "Grasp your fist with your other hand",
            "Perform quick upward thrusts until the object is expelled",
            "If unconscious, begin CPR and call 911 immediately"
        ],
        "warnings": "For pregnant women or obese individuals, place hands higher on the chest. "
                    "For infants, use back blows and chest thrusts.",
        "severity": "high"
    },
    {
        "id": "heart-attack",
        "title": "Heart Attack",
        "category": "medical",
        "emergency": 1,
        "description": "Emergency response for suspected heart attack",
        "steps": [
            "Call 911 immediately - time is critical",
            "Have the person sit down and rest comfortably",
            "Loosen tight clothing around neck and waist",
            "If prescribed, help them take their nitroglycerin",
            "Give aspirin (325mg) if not allergic and not contraindicated",
            "Stay with the person and monitor their condition",
            "Be prepared to perform CPR if they become unconscious"
        ],
        "warnings": "Do not delay calling 911. Every minute counts. Do not drive them to the hospital yourself.",
        "severity": "critical"
    },
]

SYMPTOMS = [
    {
        "id": "headache",
        "name": "headache",
        "severity": "medium",
        "description": "Pain or discomfort in the head or neck area",
        "common_causes": ["Tension", "Dehydration", "Stress", "Eye strain", "Sinus pressure"],
        "recommendations": [
            {"title": "Immediate Relief",
             "content": "Apply a cold compress to your forehead for 15-20 minutes. "
                        "Stay hydrated by drinking plenty of water."},
            {"title": "Rest and Relaxation",
             "content": "Find a quiet, dark room to rest. Practice deep breathing exercises or gentle neck stretches."},
            {"title": "Natural Remedies",
             "content": "Try peppermint oil on temples, ginger tea, or acupressure points on your head and neck."}
        ],
        "when_to_see_doctor": [
            "Sudden, severe headache (thunderclap headache)",
            "Headache with fever, neck stiffness, or rash",
            "Headache after head injury",
            "Persistent headache for several days",
            "Headache with vision changes or confusion"
        ],
        "related_remedies": ["honey-cough", "ginger-tea", "turmeric-milk"]
    },
    {
        "id": "fever",
        "name": "fever",
        "severity": "medium",
        "description": "Elevated body temperature above normal range",
        "common_causes": ["Viral infections", "Bacterial infections", "Inflammatory conditions", "Heat exhaustion"],
        "recommendations": [
            {"title": "Temperature Management",
             "content": "Take your temperature regularly. Use a cool, damp cloth on your forehead and neck."},
            {"title": "Hydration",
             "content": "Drink plenty of fluids - water, herbal teas, or electrolyte solutions to prevent dehydration."},
            {"title": "Rest and Comfort",
             "content": "Get plenty of rest in a cool, well-ventilated room. Wear lightweight, breathable clothing."}
        ],
        "when_to_see_doctor": [
            "Fever above 103°F (39.4°C) in adults",
            "Fever lasting more than 3 days",
            "Fever with severe headache or neck stiffness",
            "Fever with difficulty breathing",
            "Fever in infants under 3 months"
        ],
        "related_remedies": ["turmeric-milk", "ginger-tea", "honey-cough"]
    },
    {
        "id": "cough",
        "name": "cough",
        "severity": "low",
        "description": "Reflex action to clear airways of mucus and irritants",
        "common_causes": ["Common cold", "Flu", "Allergies", "Smoke irritation", "Post-nasal drip"],
        "recommendations": [
            {"title": "Throat Soothing",
             "content": "Drink warm liquids like honey tea, chicken soup, or herbal teas to soothe your throat."},
            {"title": "Humidity and Hydration",
             "content": "Use a humidifier or take steamy showers. Stay well-hydrated to thin mucus secretions."},
            {"title": "Natural Remedies",
             "content": "Try honey with lemon, ginger tea, or throat lozenges. Avoid irritants like smoke and dust."}
        ],
        "when_to_see_doctor": [
            "Cough lasting more than 2-3 weeks",
            "Cough with blood or colored mucus",
            "Cough with chest pain or difficulty breathing",
            "Cough with fever above 100.4°F (38°C)",
            "Cough that interferes with sleep"
        ],
        "related_remedies": ["honey-cough", "ginger-tea", "turmeric-milk"]
    },
]

CATEGORIES = [
    ('respiratory', 'Respiratory'),
    ('digestion', 'Digestion'),
    ('skin', 'Skin'),
    ('immunity', 'Immunity'),
    ('sleep', 'Sleep'),
    ('hydration', 'Hydration'),
]

GENERATED_REMEDY_COUNT = 420
GENERATED_FIRST_AID_COUNT = 120


def build_remedy(index):
    _, label = CATEGORIES[index % len(CATEGORIES)]
    return {
        "id": f"auto-remedy-{index}",
        "title": f"{label} Tip {index}",
        "description": f"Evidence-informed home remedy guidance #{index} for {label.lower()} support. "
                       "Sources: WHO/NIH/MedlinePlus summaries.",
        "category": label,
        "difficulty": "easy",
        "rating": 4.5,
        "prep_time": "5 minutes",
        "ingredients": ["Common household ingredients"],
        "instructions": [
            "Prepare ingredients as listed",
            "Combine in clean container",
            "Consume or apply as directed",
            "Monitor for reactions; discontinue if irritation occurs"
        ],
        "benefits": "General wellness support",
        "warnings": "Consult a professional for chronic or severe symptoms",
        "image": "💡"
    }


def build_first_aid(index):
    category, label = CATEGORIES[index % len(CATEGORIES)]
    emergency = index % 3 == 0
    return {
        "id": f"auto-firstaid-{index}",
        "title": f"{label} First Aid {index}",
        "category": category,
        "emergency": 1 if emergency else 0,
        "description": "Standardized first-aid guidance for common scenarios",
        "steps": [
            "Ensure scene safety and wear protective equipment if available",
            "Assess responsiveness and breathing",
            "Call emergency services if needed",
            "Provide appropriate first aid until help arrives"
        ],
        "warnings": "Follow latest local first-aid guidelines; do not exceed your training",
        "severity": "high" if emergency else "medium"
    }


def all_remedies():
    return REMEDIES + [build_remedy(i) for i in range(1, GENERATED_REMEDY_COUNT + 1)]


def all_first_aid():
    return FIRST_AID + [build_first_aid(i) for i in range(1, GENERATED_FIRST_AID_COUNT + 1)]


REMEDY_SEED_COLUMNS = ('id', 'title', 'description', 'category', 'difficulty', 'rating', 'prep_time',
                       'ingredients', 'instructions', 'benefits', 'warnings', 'image')
FIRST_AID_SEED_COLUMNS = ('id', 'title', 'category', 'emergency', 'description', 'steps', 'warnings', 'severity')
SYMPTOM_SEED_COLUMNS = ('id', 'name', 'severity', 'description', 'common_causes', 'recommendations',
                        'when_to_see_doctor', 'related_remedies')
SEED_JSON_FIELDS = ('ingredients', 'instructions', 'steps', 'common_causes', 'recommendations',
                    'when_to_see_doctor', 'related_remedies')


def _upsert(conn, table, columns, record):
    # Update in place so rows referencing seeded content (favorites) survive a re-seed
    updates = ', '.join(f"{column} = excluded.{column}" for column in columns if column != 'id')
    execute(
        conn,
        f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({', '.join('?' for _ in columns)}) "
        f"ON CONFLICT(id) DO UPDATE SET {updates}, updated_at = CURRENT_TIMESTAMP",
        [encode_json(record[c]) if c in SEED_JSON_FIELDS else record[c] for c in columns]
    )


def seed_database(path, verbose=True):
    """Insert (or refresh) the sample content. Returns counts per table."""
    remedies = all_remedies()
    first_aid = all_first_aid()

    with get_db(path) as conn:
        for remedy in remedies:
            _upsert(conn, 'remedies', REMEDY_SEED_COLUMNS, remedy)
        if verbose:
            print(f"✅ Seeded {len(remedies)} remedies")

        for item in first_aid:
            _upsert(conn, 'first_aid', FIRST_AID_SEED_COLUMNS, item)
        if verbose:
            print(f"✅ Seeded {len(first_aid)} first aid instructions")

        for symptom in SYMPTOMS:
            _upsert(conn, 'symptoms', SYMPTOM_SEED_COLUMNS, symptom)
        if verbose:
            print(f"✅ Seeded {len(SYMPTOMS)} symptoms")

    return {'remedies': len(remedies), 'first_aid': len(first_aid), 'symptoms': len(SYMPTOMS)}
