"""체인지로그 생성 파이프라인 상수"""

MAX_COMMITS = 50
MAX_DESCRIPTION_LINES = 5

NOISE_LINE_PREFIXES = ("merge", "co-authored-by", "signed-off-by")

CONTEXT_SEPARATOR = " | "
COMMIT_SEPARATOR = "\n\n---\n\n"
EMPTY_DESCRIPTION_PLACEHOLDER = "(No additional details provided)"

# 분류 우선순위: Added > Fixed > Changed > Other
ADDED_KEYWORDS = ("add", "new", "feature", "implement")
ADDED_PREFIXES = ("feat:",)
FIXED_KEYWORDS = ("fix", "bug", "error", "issue")
FIXED_PREFIXES = ("fix:",)
CHANGED_KEYWORDS = ("update", "change", "improve", "refactor", "enhance")
CHANGED_PREFIXES = ("chore:", "refactor:")

SECTION_ORDER = ("Added", "Changed", "Fixed", "Other")
NO_CHANGES_TEXT = "No changes documented."

FALLBACK_NO_API_KEY = "No AI API key configured"
FALLBACK_BOTH_FAILED = "Both providers failed"
FALLBACK_QUOTA = "AI API quota exceeded"
FALLBACK_TOKEN_LIMIT = "Token limit exceeded - too many commits. Try selecting fewer commits."
FALLBACK_AUTH = "AI API key not configured or invalid"
FALLBACK_GENERIC = "AI generation failed"

SUMMARY_MAX_LENGTH = 180
SUMMARY_MAX_LINES = 3
