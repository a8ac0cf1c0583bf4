PSYCHOMETRIC_QUESTIONS = [
  {
    "number": 1,
    "topic": "Interest Scale",
    "question": "I enjoy finding patterns and trends in data",
    "type": "likert"
  },
  {
    "number": 2,
    "topic": "Interest Scale",
    "question": "I'm naturally curious about what data can reveal about business performance",
    "type": "likert"
  },
  {
    "number": 3,
    "topic": "Interest Scale",
    "question": "I find satisfaction in creating visual representations of complex information",
    "type": "likert"
  },
  {
    "number": 4,
    "topic": "Personality Compatibility",
    "question": "I prefer working with structured, organized information rather than ambiguous concepts",
    "type": "likert"
  },
  {
    "number": 5,
    "topic": "Personality Compatibility",
    "question": "I am comfortable spending long periods focused on detailed analytical work",
    "type": "likert"
  },
  {
    "number": 6,
    "topic": "Personality Compatibility",
    "question": "I enjoy helping others understand complex information through clear explanations",
    "type": "likert"
  },
  {
    "number": 7,
    "topic": "Cognitive Style & Preferences",
    "question": "When solving problems, I prefer to break them down into smaller, logical steps",
    "type": "likert"
  },
  {
    "number": 8,
    "topic": "Cognitive Style & Preferences",
    "question": "I'm more interested in understanding 'what' the data shows than 'why' it might be happening",
    "type": "likert"
  },
  {
    "number": 9,
    "topic": "Cognitive Style & Preferences",
    "question": "I prefer working with facts and numbers over theories and concepts",
    "type": "likert"
  },
  {
    "number": 10,
    "topic": "Motivation Source",
    "question": "I'm motivated by the impact my analytical insights can have on business decisions",
    "type": "likert"
  }
]

LIKERT_SCALE = [
  {"value": 1, "label": "Strongly Disagree"},
  {"value": 2, "label": "Disagree"},
  {"value": 3, "label": "Neutral"},
  {"value": 4, "label": "Agree"},
  {"value": 5, "label": "Strongly Agree"}
]
