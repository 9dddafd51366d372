"""Static phrase tables used by the assessment generators and lesson planner.

Each table maps a ``SubjectCategory`` to candidate statements. Adding a subject
means adding entries here; the generators never hard-code phrases.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .subjects import SubjectCategory

# Categories without their own strengths, improvements or concept vocabulary
# borrow these.
FALLBACK_SUBJECT = SubjectCategory.ENGLISH

FEEDBACK_PARAGRAPHS: Dict[SubjectCategory, str] = {
    SubjectCategory.ENGLISH: (
        "Your analysis of the text shows a good understanding of the literary devices used. "
        "The essay structure flows logically, with a clear introduction, body paragraphs that "
        "develop your argument, and a conclusion that summarizes your main points."
    ),
    SubjectCategory.MATH: (
        "Your problem-solving approach demonstrates a solid understanding of the mathematical "
        "concepts. You've shown your work clearly and applied the correct formulas in most cases."
    ),
    SubjectCategory.SCIENCE: (
        "Your experimental analysis is thorough and your conclusions are well-supported by the "
        "data. Your understanding of scientific principles is evident in your explanations."
    ),
    SubjectCategory.HISTORY: (
        "Your historical analysis shows good critical thinking and an understanding of the "
        "context of events. You've effectively used primary and secondary sources to support "
        "your arguments."
    ),
    SubjectCategory.COMPUTER_SCIENCE: (
        "Your code implementation demonstrates good understanding of the concepts. The algorithm "
        "is efficient in most cases, and your documentation explains your thought process clearly."
    ),
}

GENERAL_FEEDBACK_PARAGRAPH = (
    "Your work demonstrates understanding of the core concepts and meets most of the "
    "assignment requirements."
)

FEEDBACK_CLOSING = (
    "You've addressed the key points required in the assignment, and your work shows thoughtful "
    "engagement with the material. There are some areas where more depth could strengthen your "
    "submission, but overall this represents solid work."
)

COMMON_STRENGTHS: Tuple[str, ...] = (
    "Clear organization and structure",
    "Good understanding of core concepts",
    "Effective use of supporting evidence",
)

SUBJECT_STRENGTHS: Dict[SubjectCategory, Tuple[str, ...]] = {
    SubjectCategory.ENGLISH: (
        "Strong thesis statement",
        "Effective use of textual evidence",
        "Clear analysis of literary elements",
        "Good paragraph structure with topic sentences",
    ),
    SubjectCategory.MATH: (
        "Correct application of formulas",
        "Clear step-by-step problem solving",
        "Accurate calculations",
        "Good understanding of mathematical concepts",
    ),
    SubjectCategory.SCIENCE: (
        "Thorough data analysis",
        "Well-structured experimental process",
        "Clear understanding of scientific principles",
        "Effective use of scientific terminology",
    ),
    SubjectCategory.HISTORY: (
        "Strong contextual understanding",
        "Effective use of historical sources",
        "Well-developed historical arguments",
        "Good chronological understanding",
    ),
    SubjectCategory.COMPUTER_SCIENCE: (
        "Efficient algorithm implementation",
        "Clean and readable code",
        "Good problem-solving approach",
        "Effective use of data structures",
    ),
}

COMMON_IMPROVEMENTS: Tuple[str, ...] = (
    "More detailed analysis in some sections",
    "Stronger conclusion that ties back to the main thesis",
    "More varied sentence structure to improve flow",
)

SUBJECT_IMPROVEMENTS: Dict[SubjectCategory, Tuple[str, ...]] = {
    SubjectCategory.ENGLISH: (
        "Strengthen thesis statement to be more specific",
        "Include more textual evidence to support claims",
        "Develop analysis of literary techniques further",
        "Improve transitions between paragraphs",
    ),
    SubjectCategory.MATH: (
        "Show all steps in problem-solving process",
        "Double-check calculations for accuracy",
        "Explain reasoning more clearly",
        "Apply concepts to more complex problems",
    ),
    SubjectCategory.SCIENCE: (
        "Include more detailed data analysis",
        "Strengthen connection between data and conclusions",
        "Consider alternative explanations for results",
        "More precise use of scientific terminology",
    ),
    SubjectCategory.HISTORY: (
        "Include more primary source evidence",
        "Consider multiple historical perspectives",
        "Strengthen causal analysis between events",
        "Place events in broader historical context",
    ),
    SubjectCategory.COMPUTER_SCIENCE: (
        "Optimize algorithm for better efficiency",
        "Add more comprehensive error handling",
        "Improve code documentation and comments",
        "Consider edge cases in your implementation",
    ),
}

GENERAL_RESOURCES: Tuple[str, ...] = (
    "Guide: 'Academic Writing Best Practices'",
    "Tutorial: 'Critical Thinking Skills Development'",
    "Video: 'Effective Research Strategies'",
)

# Assignment types whose general resource is fixed rather than drawn.
ASSIGNMENT_TYPE_RESOURCES: Dict[str, str] = {
    "lab": "Video: 'Effective Research Strategies'",
    "report": "Video: 'Effective Research Strategies'",
    "project": "Tutorial: 'Critical Thinking Skills Development'",
}

SUBJECT_RESOURCES: Dict[SubjectCategory, Tuple[str, ...]] = {
    SubjectCategory.ENGLISH: (
        "Guide: 'Effective Literary Analysis Techniques'",
        "Video: 'How to Craft a Strong Thesis Statement'",
        "Resource: 'Writing Effective Academic Essays'",
        "Tool: 'Citation and Reference Generator'",
    ),
    SubjectCategory.MATH: (
        "Tutorial: 'Step-by-Step Problem Solving Strategies'",
        "Video Series: 'Mastering Calculus Concepts'",
        "Interactive Tool: 'Algebra Equation Solver with Steps'",
        "Practice Problems: 'Advanced Applications'",
    ),
    SubjectCategory.SCIENCE: (
        "Guide: 'Scientific Research Methodology'",
        "Video: 'Data Analysis Techniques in Science'",
        "Interactive Lab: 'Virtual Science Experiments'",
        "Resource: 'Scientific Paper Writing Guide'",
    ),
    SubjectCategory.HISTORY: (
        "Database: 'Primary Historical Sources Archive'",
        "Guide: 'Historical Analysis Methods'",
        "Video Series: 'Understanding Historical Context'",
        "Tool: 'Interactive Timeline Creator'",
    ),
    SubjectCategory.COMPUTER_SCIENCE: (
        "Tutorial: 'Algorithm Optimization Techniques'",
        "Video: 'Advanced Data Structures Explained'",
        "Tool: 'Code Profiler and Analyzer'",
        "Practice Problems: 'Coding Challenges for Growth'",
    ),
}

SUBJECT_CONCEPTS: Dict[SubjectCategory, Tuple[str, ...]] = {
    SubjectCategory.ENGLISH: (
        "Thesis Development",
        "Textual Analysis",
        "Literary Devices",
        "Essay Structure",
        "Critical Thinking",
        "Citation Format",
    ),
    SubjectCategory.MATH: (
        "Algebraic Manipulation",
        "Function Analysis",
        "Problem Solving",
        "Mathematical Reasoning",
        "Calculation Accuracy",
        "Formula Application",
    ),
    SubjectCategory.SCIENCE: (
        "Scientific Method",
        "Data Analysis",
        "Hypothesis Testing",
        "Experimental Design",
        "Scientific Writing",
        "Technical Terminology",
    ),
    SubjectCategory.HISTORY: (
        "Historical Analysis",
        "Source Evaluation",
        "Contextual Understanding",
        "Causal Reasoning",
        "Chronological Understanding",
        "Historiography",
    ),
    SubjectCategory.COMPUTER_SCIENCE: (
        "Algorithm Design",
        "Data Structures",
        "Code Efficiency",
        "Problem Decomposition",
        "Debugging Skills",
        "Documentation",
    ),
}

GROWTH_ACTIVITY_TEMPLATES: Tuple[str, ...] = (
    "Practice exercise: {concept} fundamentals",
    "Review guide: Advanced {concept} techniques",
    "Complete the interactive {concept} module",
)

LESSON_TOPICS: Dict[SubjectCategory, Tuple[str, ...]] = {
    SubjectCategory.MATH: ("Algebra", "Geometry", "Calculus", "Statistics"),
    SubjectCategory.ENGLISH: ("Grammar", "Literature", "Writing", "Comprehension"),
    SubjectCategory.SCIENCE: ("Biology", "Chemistry", "Physics", "Earth Science"),
    SubjectCategory.HISTORY: ("Ancient History", "World Wars", "Cultural Movements", "Political Systems"),
    SubjectCategory.COMPUTER_SCIENCE: ("Programming", "Data Structures", "Algorithms", "Web Development"),
}

GENERIC_LESSON_TOPICS: Tuple[str, ...] = ("Topic 1", "Topic 2", "Topic 3")

PROMPT_FEEDBACK_RESPONSE = (
    "This submission demonstrates a clear understanding of the core concepts. The analysis "
    "section is particularly strong, showing depth of thought and critical engagement with the "
    "material. To improve, consider strengthening the conclusion by explicitly connecting back "
    "to the thesis statement. Also, some citations could be more effectively integrated to "
    "support your key points. Overall, this is solid work that shows good progress in mastering "
    "the subject material."
)
