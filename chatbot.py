"""Rule-based health chat assistant.

Matches the user's message against a small keyword table and answers with
natural-remedy guidance plus ids of remedies worth suggesting.
"""
from health_alerts import alert_manager

# Pre-defined responses for common health queries (checked in order)
PREDEFINED_RESPONSES = {
    'headache': {
        'message': "For headaches, try these natural remedies:\n\n"
                   "1. **Ginger Tea**: Anti-inflammatory properties can help reduce headache pain\n"
                   "2. **Peppermint Oil**: Apply diluted peppermint oil to temples\n"
                   "3. **Hydration**: Dehydration often causes headaches - drink plenty of water\n"
                   "4. **Rest**: Lie down in a dark, quiet room\n\n"
                   "⚠️ Seek medical attention if headaches are severe, sudden, or accompanied by other symptoms.",
        'remedies': ['ginger-tea', 'peppermint-oil', 'hydration'],
    },
    'fever': {
        'message': "For managing fever naturally:\n\n"
                   "1. **Stay Hydrated**: Drink plenty of fluids (water, herbal teas)\n"
                   "2. **Rest**: Get adequate sleep and rest\n"
                   "3. **Cool Compress**: Apply cool, damp cloth to forehead\n"
                   "4. **Elderberry Tea**: Natural immune booster\n"
                   "5. **Garlic**: Has antimicrobial properties\n\n"
                   "🌡️ Monitor temperature. Seek medical care if fever is above 103°F (39.4°C) "
                   "or persists for more than 3 days.",
        'remedies': ['elderberry-tea', 'garlic-remedy', 'cool-compress'],
    },
    'cough': {
        'message': "Natural cough relief options:\n\n"
                   "1. **Honey**: Take 1-2 teaspoons of raw honey\n"
                   "2. **Ginger Tea**: Add ginger, lemon, and honey to hot water\n"
                   "3. **Thyme Tea**: Natural expectorant\n"
                   "4. **Steam Inhalation**: Inhale steam from hot water with eucalyptus oil\n"
                   "5. **Stay Hydrated**: Keep throat moist with warm liquids\n\n"
                   "🤧 If cough persists for more than 2 weeks or is severe, consult a healthcare provider.",
        'remedies': ['honey-cough', 'ginger-tea', 'thyme-tea'],
    },
    'cold': {
        'message': "Cold symptom relief:\n\n"
                   "1. **Zinc Supplements**: May reduce cold duration\n"
                   "2. **Vitamin C**: Boost immune system\n"
                   "3. **Chicken Soup**: Hydration and nutrients\n"
                   "4. **Nasal Irrigation**: Saline rinse for congestion\n"
                   "5. **Echinacea Tea**: Immune system support\n"
                   "6. **Rest**: Allow your body to heal\n\n"
                   "❄️ Most colds resolve in 7-10 days. See a doctor if symptoms worsen or persist.",
        'remedies': ['echinacea-tea', 'chicken-soup', 'zinc-supplements'],
    },
    'sore throat': {
        'message': "Sore throat relief:\n\n"
                   "1. **Salt Water Gargle**: Mix 1/4 teaspoon salt in warm water\n"
                   "2. **Honey and Lemon**: Mix in warm water or tea\n"
                   "3. **Chamomile Tea**: Anti-inflammatory properties\n"
                   "4. **Licorice Root**: Natural throat soother\n"
                   "5. **Stay Hydrated**: Warm liquids help\n\n"
                   "🗣️ If sore throat lasts more than a week or is severe, see a healthcare provider.",
        'remedies': ['salt-gargle', 'honey-lemon', 'chamomile-tea'],
    },
    'stomach ache': {
        'message': "Stomach ache relief:\n\n"
                   "1. **Ginger Tea**: Natural digestive aid\n"
                   "2. **Peppermint Tea**: Soothes stomach muscles\n"
                   "3. **Chamomile Tea**: Anti-inflammatory and calming\n"
                   "4. **Bland Diet**: BRAT diet (bananas, rice, applesauce, toast)\n"
                   "5. **Heat Therapy**: Warm compress on stomach\n\n"
                   "🤢 If pain is severe, persistent, or accompanied by vomiting/diarrhea, seek medical attention.",
        'remedies': ['ginger-tea', 'peppermint-tea', 'chamomile-tea'],
    },
    'insomnia': {
        'message': "Natural sleep aids:\n\n"
                   "1. **Chamomile Tea**: Promotes relaxation\n"
                   "2. **Lavender**: Use essential oil or tea\n"
                   "3. **Magnesium**: Natural muscle relaxant\n"
                   "4. **Sleep Routine**: Consistent bedtime and wake time\n"
                   "5. **Limit Screen Time**: Avoid screens 1 hour before bed\n"
                   "6. **Meditation**: Relaxation techniques\n\n"
                   "😴 If insomnia persists for weeks, consider consulting a sleep specialist.",
        'remedies': ['chamomile-tea', 'lavender-tea', 'magnesium-supplements'],
    },
}

HEALTH_KEYWORDS = ['pain', 'hurt', 'ache', 'sick', 'ill', 'symptoms', 'remedy', 'treatment']

GENERAL_WELLNESS = {
    'message': "I understand you're experiencing some health concerns. Here are some general wellness tips:\n\n"
               "1. **Stay Hydrated**: Drink plenty of water throughout the day\n"
               "2. **Rest**: Ensure adequate sleep (7-9 hours)\n"
               "3. **Balanced Diet**: Eat fruits, vegetables, and whole grains\n"
               "4. **Exercise**: Regular physical activity boosts immunity\n"
               "5. **Stress Management**: Practice relaxation techniques\n\n"
               "💡 For specific symptoms, try describing them more clearly (e.g., 'headache', 'fever', 'cough').\n\n"
               "⚠️ Remember: This is not medical advice. Always consult a healthcare professional "
               "for serious or persistent symptoms.",
    'remedies': ['general-wellness'],
}

GREETING = {
    'message': "Hello! I'm your health assistant. I can help you with:\n\n"
               "• Natural remedies for common ailments\n"
               "• First aid guidance\n"
               "• General wellness tips\n"
               "• Symptom management\n\n"
               "Try asking about specific symptoms like:\n"
               "- Headache remedies\n"
               "- Cold and flu relief\n"
               "- Stomach ache treatment\n"
               "- Sleep problems\n"
               "- Sore throat remedies\n\n"
               "How can I help you today?",
    'remedies': [],
}

EMERGENCY_BANNER = (
    "🚨 **EMERGENCY ALERT**: What you describe may need urgent care. "
    "Call your local emergency number or go to the nearest emergency room now. "
    "Do not wait for symptoms to improve.\n\n"
)


def generate_response(user_message):
    """Return {'message', 'remedies'} and, for emergency phrases, an 'alert' entry"""
    text = user_message.lower()

    response = None
    for keyword, answer in PREDEFINED_RESPONSES.items():
        if keyword in text:
            response = answer
            break

    if response is None:
        if any(word in text for word in HEALTH_KEYWORDS):
            response = GENERAL_WELLNESS
        else:
            response = GREETING

    reply = {'message': response['message'], 'remedies': list(response['remedies'])}

    alert = alert_manager.analyze(user_message)
    if alert:
        reply['message'] = EMERGENCY_BANNER + reply['message']
        reply['alert'] = {
            'level': alert['alert_level'],
            'suggested_action': alert['suggested_action'],
        }

    return reply


def suggestions():
    return [
        {'keyword': keyword, 'description': f"Get remedies for {keyword}", 'category': 'health'}
        for keyword in PREDEFINED_RESPONSES
    ]
