import random

from records import get_grade, percentage

# Quiz questions data
QUIZ_QUESTIONS = {
    'first-aid': [
        {
            'id': 1,
            'question': "What is the first step when someone is bleeding heavily?",
            'options': [
                "Apply a tourniquet immediately",
                "Apply direct pressure to the wound",
                "Elevate the injured area",
                "Give them water"
            ],
            'correct': 1,
            'explanation': "Direct pressure is the first and most important step to control bleeding. "
                           "Apply firm, steady pressure directly on the wound."
        },
        {
            'id': 2,
            'question': "How should you position someone who is unconscious but breathing?",
            'options': [
                "On their back with head elevated",
                "On their side (recovery position)",
                "Sitting upright",
                "On their stomach"
            ],
            'correct': 1,
            'explanation': "The recovery position (on their side) helps keep the airway clear "
                           "and prevents choking if they vomit."
        },
        {
            'id': 3,
            'question': "What should you do if someone is choking?",
            'options': [
                "Give them water immediately",
                "Perform the Heimlich maneuver",
                "Pat them on the back gently",
                "Wait for them to cough it out"
            ],
            'correct': 1,
            'explanation': "The Heimlich maneuver (abdominal thrusts) is the standard first aid "
                           "technique for conscious choking victims."
        },
        {
            'id': 4,
            'question': "For a minor burn, what should you do first?",
            'options': [
                "Apply ice directly",
                "Pop any blisters",
                "Run cool water over the burn",
                "Apply butter or oil"
            ],
            'correct': 2,
            'explanation': "Cool running water helps reduce pain and prevents further tissue damage. "
                           "Avoid ice, butter, or oils on burns."
        },
        {
            'id': 5,
            'question': "How long should you perform CPR before checking for signs of life?",
            'options': [
                "30 seconds",
                "2 minutes",
                "5 minutes",
                "Until help arrives"
            ],
            'correct': 1,
            'explanation': "Perform CPR in cycles of 30 compressions and 2 breaths, "
                           "checking for signs of life every 2 minutes."
        },
        {
            'id': 6,
            'question': "What is the correct hand placement for chest compressions?",
            'options': [
                "On the lower part of the breastbone",
                "On the upper part of the chest",
                "On the left side of the chest",
                "Anywhere on the chest"
            ],
            'correct': 0,
            'explanation': "Place the heel of one hand on the lower half of the breastbone, "
                           "with the other hand on top."
        },
        {
            'id': 7,
            'question': "For a nosebleed, what should you do?",
            'options': [
                "Tilt head back",
                "Pinch nostrils and lean forward slightly",
                "Blow nose hard",
                "Insert cotton in nostrils"
            ],
            'correct': 1,
            'explanation': "Pinch the nostrils together and lean forward slightly to prevent "
                           "blood from going down the throat."
        },
        {
            'id': 8,
            'question': "What should you do if someone has a seizure?",
            'options': [
                "Hold them down",
                "Put something in their mouth",
                "Clear the area and protect their head",
                "Give them water"
            ],
            'correct': 2,
            'explanation': "Clear the area of dangerous objects and protect their head. "
                           "Do not restrain them or put anything in their mouth."
        },
        {
            'id': 9,
            'question': "For a sprained ankle, what does RICE stand for?",
            'options': [
                "Rest, Ice, Compression, Elevation",
                "Run, Ice, Care, Exercise",
                "Rest, Injury, Care, Elevation",
                "Relax, Ice, Compression, Exercise"
            ],
            'correct': 0,
            'explanation': "RICE is the standard treatment: Rest, Ice, Compression, and Elevation "
                           "to reduce swelling and pain."
        },
        {
            'id': 10,
            'question': "What should you do if someone is having a heart attack?",
            'options': [
                "Give them aspirin immediately",
                "Have them lie down and rest",
                "Call emergency services and keep them comfortable",
                "Give them water and wait"
            ],
            'correct': 2,
            'explanation': "Call emergency services immediately. Keep the person calm and "
                           "comfortable while waiting for help."
        },
    ]
}


def quiz_types():
    types = []
    for quiz_type, questions in QUIZ_QUESTIONS.items():
        label = quiz_type.replace('-', ' ')
        types.append({
            'id': quiz_type,
            'name': label.title(),
            'description': f"Test your knowledge of {label}",
            'questionCount': len(questions),
        })
    return types


def pick_questions(quiz_type, limit=10, rng=random):
    """Random sample of questions with the answers stripped"""
    questions = QUIZ_QUESTIONS[quiz_type]
    count = max(0, min(limit, len(questions)))
    selected = rng.sample(questions, count)
    return [{'id': q['id'], 'question': q['question'], 'options': q['options']} for q in selected]


def _as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def grade_answers(quiz_type, answers):
    """
    Score {questionId: optionIndex}. Only ids present in the bank are scored;
    the total is the number of answered keys.
    """
    bank = {q['id']: q for q in QUIZ_QUESTIONS[quiz_type]}
    score = 0
    results = []

    for question_id, answer in answers.items():
        question = bank.get(_as_int(question_id))
        if question is None:
            continue
        user_answer = _as_int(answer)
        is_correct = user_answer == question['correct']
        if is_correct:
            score += 1
        results.append({
            'questionId': question['id'],
            'question': question['question'],
            'userAnswer': user_answer,
            'correctAnswer': question['correct'],
            'isCorrect': is_correct,
            'explanation': question['explanation'],
        })

    total = len(answers)
    percent = percentage(score, total)
    return {
        'score': score,
        'totalQuestions': total,
        'percentage': percent,
        'grade': get_grade(percent),
        'results': results,
    }
