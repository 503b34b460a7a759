"""
Vocabulary and pattern bank for resume_interview

Static, read-only word lists and compiled patterns shared by the
segmenter, the extraction tiers and the answer scorer.
"""

import re


def _word_pattern(words: tuple[str, ...], flags: int = re.IGNORECASE) -> re.Pattern[str]:
    """Compile a whole-word alternation, longest words first."""
    ordered = sorted(words, key=len, reverse=True)
    return re.compile(r"\b(" + "|".join(ordered) + r")\b", flags)


# ============================================================================
# TECHNOLOGY VOCABULARY
# ============================================================================

TECH_KEYWORDS: tuple[str, ...] = (
    "react", "node", "python", "java", "javascript", "typescript",
    "mongodb", "sql", "postgres", "mysql", "docker", "kubernetes",
    "aws", "azure", "gcp", "express", "next", "vue", "angular",
    "django", "flask", "spring", "fastapi", "graphql", "rest", "api",
    "html", "css", "tailwind", "bootstrap", "git", "github", "jenkins",
    "ml", "ai", "tensorflow", "pytorch", "xgboost", "pandas", "numpy",
    "postgresql", "redis", "kafka", "firebase", "sqlite",
)

# Reduced vocabulary for the emergency scan: technologies plus role words
EMERGENCY_KEYWORDS: tuple[str, ...] = (
    "react", "node", "python", "java", "javascript", "typescript",
    "mongodb", "sql", "docker", "api", "ml", "ai", "express",
    "database", "backend", "frontend", r"full.?stack",
)

TECH_PATTERN = _word_pattern(TECH_KEYWORDS)
EMERGENCY_PATTERN = _word_pattern(EMERGENCY_KEYWORDS)


# ============================================================================
# ACHIEVEMENT VERBS
# ============================================================================

ACHIEVEMENT_VERBS: tuple[str, ...] = (
    "built", "developed", "created", "implemented", "designed",
    "optimized", "improved", "reduced", "increased", "deployed",
    "architected",
)

# Emergency tier accepts a broader set of outcome verbs
OUTCOME_VERBS: tuple[str, ...] = (
    "reduced", "improved", "increased", "built", "developed", "created",
    "implemented", "optimized", "deployed", "achieved", "solved",
)

ACHIEVEMENT_PATTERN = _word_pattern(ACHIEVEMENT_VERBS)
OUTCOME_PATTERN = _word_pattern(OUTCOME_VERBS)

SENTENCE_SPLIT = re.compile(r"[.;!?]")


# ============================================================================
# DISQUALIFYING PATTERNS
# ============================================================================

# A candidate whose title or description matches any of these is an
# education or skills block, not a project.
DISQUALIFYING_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(?:cgpa|gpa|percentage|grade|university|college|school|degree"
        r"|b\.?tech|b\.e|m\.?tech|phd)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:skills?|languages?|tools?|frameworks?|certifications?|awards?"
        r"|hackathons?|competitions?)\b",
        re.IGNORECASE,
    ),
)


def is_disqualified(text: str) -> bool:
    """True when text looks like an education or skills-section entry."""
    return any(pattern.search(text) for pattern in DISQUALIFYING_PATTERNS)


# ============================================================================
# SECTION HEADINGS
# ============================================================================

PROJECT_HEADING = re.compile(
    r"^[ \t]*(?:technical |personal |academic |key |selected )?projects?[ \t]*:?[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)

# Headings that end a projects section. Bare heading, or "Heading: ..." form.
SECTION_HEADINGS: tuple[str, ...] = (
    "education", "skills", "technical skills", "experience",
    "work experience", "professional experience", "certifications?",
    "achievements", "awards", "publications", "interests", "languages",
    "summary", "references",
)

NEXT_SECTION = re.compile(
    r"^[ \t]*(?:" + "|".join(SECTION_HEADINGS) + r")[ \t]*(?::.*)?$",
    re.IGNORECASE | re.MULTILINE,
)


# ============================================================================
# LIST MARKERS
# ============================================================================

BULLET_LINE = re.compile(r"^[ \t]*(?:[•▪●◦‣\-*]|\d+[.)])[ \t]+")
LEADING_MARKER = re.compile(r"^[ \t]*(?:[•▪●◦‣\-*]+|\d+[.)])?[ \t]*")

LABELLED_TITLE = re.compile(r"^[ \t]*(?:title|project)[ \t]*:[ \t]*(.+)$", re.IGNORECASE)


# ============================================================================
# DURATION AND ROLE HINTS
# ============================================================================

_MONTH = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?"

DURATION_PATTERN = re.compile(
    rf"\b((?:{_MONTH}\s+)?(?:19|20)\d{{2}}\s*(?:-|–|—|to)\s*"
    rf"(?:(?:{_MONTH}\s+)?(?:19|20)\d{{2}}|present|current|now|ongoing))",
    re.IGNORECASE,
)

ROLE_PATTERN = re.compile(
    r"(?:\brole\s*:\s*([^\n.;,]{3,60})|\bas\s+(?:an?\s+|the\s+)?"
    r"((?:lead|senior|junior|principal|staff|head|chief)?\s*"
    r"(?:[a-z\-]+\s+)?(?:developer|engineer|architect|designer|manager|analyst|lead)))",
    re.IGNORECASE,
)

SENIORITY_KEYWORDS: tuple[str, ...] = (
    "lead", "senior", "principal", "staff", "architect", "head",
    "manager", "chief",
)

SENIORITY_PATTERN = _word_pattern(SENIORITY_KEYWORDS)


# ============================================================================
# ANSWER SCORING SIGNALS
# ============================================================================

EXAMPLE_PATTERN = re.compile(
    r"\b(?:for example|for instance|example|instance|case|such as|like when)\b",
    re.IGNORECASE,
)

TECHNICAL_TERMS_PATTERN = re.compile(
    r"\b(?:algorithms?|architecture|implementation|apis?|databases?|performance"
    r"|latency|scalab\w*|deploy\w*|containers?|docker|kubernetes|threads?|async"
    r"|lambdas?|queues?|cach\w*|redis|mongodb|postgres\w*|sql|rest|graphql)\b",
    re.IGNORECASE,
)

METRIC_PATTERN = re.compile(
    r"\b\d+(?:\.\d+)?\s*%"
    r"|\b\d+(?:\.\d+)?\s*x\b"
    r"|\b\d+(?:\.\d+)?\s*(?:ms|milliseconds?|sec|secs|seconds?|minutes?|mins?|hours?)\b"
    r"|\bimprov(?:ed|ement|ements|ing)\b"
    r"|\breduc(?:ed|tion|ing)\b",
    re.IGNORECASE,
)

TOKEN_PATTERN = re.compile(r"[a-z0-9][a-z0-9+#.\-]*[a-z0-9+#]|[a-z0-9]", re.IGNORECASE)

STOPWORDS: frozenset[str] = frozenset({
    "the", "and", "for", "that", "this", "with", "was", "were", "are",
    "but", "not", "you", "your", "our", "have", "has", "had", "from",
    "they", "them", "their", "there", "then", "than", "what", "when",
    "where", "which", "while", "who", "whom", "why", "how", "all",
    "any", "can", "could", "would", "should", "will", "did", "does",
    "doing", "been", "being", "into", "onto", "over", "under", "about",
    "also", "just", "very", "some", "such", "more", "most", "other",
    "each", "only", "own", "same", "both", "few", "too", "out", "off",
    "its", "it's", "his", "her", "she", "him", "i'm", "we're", "because",
    "through", "after", "before", "again", "further", "once", "here",
    "these", "those", "so", "my", "me", "we", "us", "of", "to", "in",
    "on", "at", "by", "an", "a", "is", "it", "be", "as", "or", "if",
    "up", "do", "no", "yes", "got", "get", "used", "using", "use",
    "really", "like", "lot", "lots", "things", "thing", "well",
})
