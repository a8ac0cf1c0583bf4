TECHNICAL_QUESTIONS = [
  {
    "number": 1,
    "topic": "Logical Reasoning",
    "question": "If Sales = 100 and Growth Rate = 15%, what would be the projected sales for next year?",
    "options": ["115", "85", "150", "100.15"],
    "correct": 0
  },
  {
    "number": 2,
    "topic": "Logical Reasoning",
    "question": "In a dashboard, if you want to show data for 'Current Month' vs 'Previous Month', which filter logic makes most sense?",
    "options": [
      "Date >= TODAY() AND Date < LAST_MONTH()",
      "Date = MONTH(TODAY()) OR Date = MONTH(TODAY())-1",
      "Date >= STARTOFMONTH(TODAY()) OR Date >= STARTOFMONTH(DATEADD(MONTH,-1,TODAY()))",
      "Date BETWEEN CURRENT_MONTH AND PREVIOUS_MONTH"
    ],
    "correct": 2
  },
  {
    "number": 3,
    "topic": "Numerical Aptitude",
    "question": "A company's revenue increased from $500K to $650K. What is the percentage increase?",
    "options": ["30%", "25%", "20%", "35%"],
    "correct": 0
  },
  {
    "number": 4,
    "topic": "Numerical Aptitude",
    "question": "If you have 1000 customers and want to show the top 10% in a chart, how many customers would that be?",
    "options": ["10", "100", "50", "90"],
    "correct": 1
  },
  {
    "number": 5,
    "topic": "Data Literacy",
    "question": "Which chart type is BEST for showing how a value changes over time?",
    "options": ["Pie Chart", "Bar Chart", "Line Chart", "Scatter Plot"],
    "correct": 2
  },
  {
    "number": 6,
    "topic": "Data Literacy",
    "question": "In a dataset with columns: CustomerID, OrderDate, Product, Quantity, Revenue - which would be the best 'primary key'?",
    "options": ["Product", "OrderDate", "CustomerID + OrderDate + Product", "Revenue"],
    "correct": 2
  },
  {
    "number": 7,
    "topic": "BI Tool Concepts",
    "question": "What is a 'slicer' in Power BI/Tableau used for?",
    "options": [
      "To cut data into smaller files",
      "To filter data interactively in dashboards",
      "To slice charts into segments",
      "To remove unwanted columns"
    ],
    "correct": 1
  },
  {
    "number": 8,
    "topic": "BI Tool Concepts",
    "question": "When creating a dashboard, what should you prioritize?",
    "options": [
      "Using as many colors as possible",
      "Including every available metric",
      "Clear visual hierarchy and user experience",
      "Complex animations and effects"
    ],
    "correct": 2
  }
]
