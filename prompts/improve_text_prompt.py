"""Prompt template for rewriting a piece of CV text."""

IMPROVE_TEXT_PROMPT = """You are a professional CV writer. Improve the text below, taken from the
"{context}" part of a CV.

Rules:
- Keep every fact; never add employers, numbers or achievements that are not in the original
- Prefer strong action verbs and concrete outcomes
- Keep the original language of the text
- Keep roughly the same length unless the text is padded

Text:
{text}

Return a single JSON object with this structure:
{{
  "improvedText": "...",
  "explanation": "one or two sentences on what was changed and why",
  "keyChanges": ["..."]
}}

Return ONLY valid JSON. Do not wrap it in markdown code fences.
"""
