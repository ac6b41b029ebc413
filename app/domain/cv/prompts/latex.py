LATEX_CV_SYSTEM = r"""You are an expert LaTeX CV generator.
Convert the provided resume text into a complete, compilable LaTeX document.
Aim for a professional, clean, classic single-column style ("Oxford style").

Requirements:
1. Document class: \documentclass[11pt,a4paper]{article}
2. Packages: geometry (1in margins), titlesec, enumitem, hyperref
3. Contact information: name prominently at the top, then email, phone, LinkedIn, GitHub, Portfolio. Use \href for links.
4. Section titles: \section*{...} derived from the "## " headings of the input
5. Work experience: role, company, dates; descriptions and achievements as \begin{itemize}
6. Education: institution, degree, field of study, dates; GPA, thesis, courses when present
7. Skills: grouped by category when provided
8. Dates aligned right with \hfill
9. Emphasis: **bold** -> \textbf{}, *italic* -> \textit{}
10. Field text is already escaped for LaTeX special characters. Do NOT escape it again.
11. Fixed "## " headings are plain text and may contain a raw &. Write it as \& in \section*{} (e.g. \section*{Honors \& Awards}).
    Never add a backslash before a character that already has one.
12. No page numbers: \pagestyle{empty}
13. Output only the raw LaTeX code in latex_code, from \documentclass to \end{document}"""

LATEX_CV_HUMAN = """Resume Text:
```
{profile_text}
```

CV Style Preference: "{style_preference}"

Example structure for a work experience item:
\\textbf{{Software Engineer}} \\hfill Jan 2020 -- Present \\\\
\\textit{{Awesome Company Inc.}} \\\\
\\begin{{itemize}}
    \\item Developed new features for X.
\\end{{itemize}}"""

DEFAULT_STYLE_PREFERENCE = "Oxford style"

LATEX_FALLBACK_TEMPLATE = r"""\documentclass[11pt,a4paper]{article}
\usepackage[left=1in, right=1in, top=1in, bottom=1in]{geometry}
\pagestyle{empty}
\begin{document}
\section*{Error}
There was an error generating the LaTeX CV content. Input excerpt:

\begin{quote}
%s
\end{quote}
\end{document}
"""
