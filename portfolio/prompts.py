"""Prompt templates for turning resume text into a portfolio profile."""

PROFILE_KEYS = ("name", "title", "about", "skills", "projects", "experience", "education")

RESUME_MARKER = "RESUME TEXT BELOW:"

PROFILE_INSTRUCTIONS = (
    "You are given a candidate's resume text.\n"
    "Return a SINGLE valid JSON object ONLY, with no preface, no markdown, no code fences.\n"
    f"MANDATORY keys: {', '.join(PROFILE_KEYS)}.\n"
    "- name: string\n"
    "- title: concise professional title\n"
    "- about: 2-4 sentences summary\n"
    "- skills: array of strings (deduplicate, normalized)\n"
    "- projects: array of objects [{name, description, tech}]\n"
    "- experience: array of objects [{company, role, start, end, summary, achievements[]}]\n"
    "- education: array of objects [{institution, degree, start, end, details}]\n"
    "If information is missing, infer conservatively or use empty strings/arrays, "
    "but STILL return a single valid JSON object.\n"
)


def build_prompt(resume_text: str) -> str:
    """Instruction block followed by the resume text, verbatim and uncapped."""
    return f"{PROFILE_INSTRUCTIONS}\n{RESUME_MARKER}\n{resume_text}"
