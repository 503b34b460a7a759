"""
Resume Extraction Prompt Templates

Prompt used by the inference tier of the project extractor.
"""

RESUME_CHAR_LIMIT = 3000


class ExtractorPrompts:
    """
    Prompt templates for pulling projects out of a resume.

    Key principles:
    - Ask for JSON only, no prose
    - Keep the resume excerpt bounded
    """

    OUTPUT_FORMAT = (
        '[{"title": "...", "description": "...", '
        '"technologies": ["...", "..."], "achievements": ["..."]}]'
    )

    def extract_projects_prompt(self, resume_text: str) -> str:
        """Generate prompt asking for a JSON array of projects."""
        excerpt = resume_text[:RESUME_CHAR_LIMIT]

        return f"""Extract all technical projects from this resume. Return ONLY a JSON array of project objects with: title, description, technologies[], achievements[].

Resume:
{excerpt}

Format: {self.OUTPUT_FORMAT}"""
