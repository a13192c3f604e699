"""Review prompt sent to the text-generation model.

The section headings and the five-field feedback template are what the
model keys its answer on, so keep them stable.
"""

from __future__ import annotations

from filelens_core.utils.language import SupportedLanguage


def create_analysis_prompt(code: str, filename: str, focus: str, language: SupportedLanguage) -> str:
    return f"""
You are an expert code reviewer focusing on issues related to {focus}.
 Analyze this {language} code with emphasis on: {focus}

1. **Bugs and Logic Issues** - Potential runtime errors, edge cases, off-by-one errors
2. **Performance Concerns** - Inefficient algorithms, memory leaks, unnecessary operations
3. **Security Issues** - Input validation, SQL injection, XSS vulnerabilities
4. **Code Quality** - Readability, maintainability, adherence to best practices
5. **Testing Gaps** - Missing test cases, untestable code patterns

Code to review ({filename}):
```{language.lower()}
{code}
```

Provide specific, actionable feedback in this format:
- **Issue Type:** Brief description
- **Location:** Line number or function name
- **Problem:** What's wrong
- **Fix:** Specific recommendation
- **Priority:** High/Medium/Low

"""
