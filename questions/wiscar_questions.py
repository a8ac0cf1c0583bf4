# Two Likert statements per WISCAR dimension, asked in W-I-S-C-A-R order.
WISCAR_QUESTIONS = [
  {
    "number": 1,
    "dimension": "will",
    "topic": "Will",
    "question": "I stick with challenging projects even when they become difficult"
  },
  {
    "number": 2,
    "dimension": "will",
    "topic": "Will",
    "question": "I'm willing to put in extra hours to master new tools and concepts"
  },
  {
    "number": 3,
    "dimension": "interest",
    "topic": "Interest",
    "question": "I find myself naturally drawn to understanding how businesses use data"
  },
  {
    "number": 4,
    "dimension": "interest",
    "topic": "Interest",
    "question": "I enjoy exploring new ways to visualize and present information"
  },
  {
    "number": 5,
    "dimension": "skill",
    "topic": "Skill",
    "question": "I'm comfortable working with spreadsheets and basic formulas"
  },
  {
    "number": 6,
    "dimension": "skill",
    "topic": "Skill",
    "question": "I can easily identify trends and patterns in data sets"
  },
  {
    "number": 7,
    "dimension": "cognitive",
    "topic": "Cognitive Readiness",
    "question": "I can quickly understand complex business processes and requirements"
  },
  {
    "number": 8,
    "dimension": "cognitive",
    "topic": "Cognitive Readiness",
    "question": "I enjoy breaking down complicated problems into smaller parts"
  },
  {
    "number": 9,
    "dimension": "ability",
    "topic": "Ability to Learn",
    "question": "I actively seek feedback to improve my work"
  },
  {
    "number": 10,
    "dimension": "ability",
    "topic": "Ability to Learn",
    "question": "I'm comfortable learning new software tools and technologies"
  },
  {
    "number": 11,
    "dimension": "reality",
    "topic": "Real-World Alignment",
    "question": "I understand that BI work involves both technical skills and business communication"
  },
  {
    "number": 12,
    "dimension": "reality",
    "topic": "Real-World Alignment",
    "question": "I'm interested in roles that bridge technology and business strategy"
  }
]

WISCAR_DESCRIPTIONS = {
  "will": "Grit, perseverance, and consistency in learning",
  "interest": "Curiosity and long-term relevance to your goals",
  "skill": "Current match to BI tools' core requirements",
  "cognitive": "Pattern thinking and comprehension speed",
  "ability": "Openness, reflection, and feedback acceptance",
  "reality": "Career expectations vs actual role duties"
}
