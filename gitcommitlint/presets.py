"""Built-in shareable configurations that ``extends`` can refer to."""
from typing import Any, Dict

CONVENTIONAL = "@commitlint/config-conventional"

PRESETS: Dict[str, Dict[str, Any]] = {
    CONVENTIONAL: {
        "rules": {
            "body-leading-blank": [1, "always"],
            "body-max-line-length": [2, "always", 100],
            "footer-leading-blank": [1, "always"],
            "footer-max-line-length": [2, "always", 100],
            "header-max-length": [2, "always", 100],
            "header-trim": [2, "always"],
            "subject-case": [
                2,
                "never",
                ["sentence-case", "start-case", "pascal-case", "upper-case"],
            ],
            "subject-empty": [2, "never"],
            "subject-full-stop": [2, "never", "."],
            "type-case": [2, "always", "lower-case"],
            "type-empty": [2, "never"],
            "type-enum": [
                2,
                "always",
                [
                    "build",
                    "chore",
                    "ci",
                    "docs",
                    "feat",
                    "fix",
                    "perf",
                    "refactor",
                    "revert",
                    "style",
                    "test",
                ],
            ],
        },
    },
}

# The rule table shipped with this project, applied on top of CONVENTIONAL.
DEFAULT_RULES: Dict[str, Any] = {
    "type-enum": [
        2,
        "always",
        ["feat", "fix", "refactor", "docs", "test", "chore", "perf", "ci", "security"],
    ],
    "header-max-length": [1, "always", 72],
    "subject-full-stop": [2, "never", "."],
    "subject-case": [1, "always", "lower-case"],
    "body-leading-blank": [2, "always"],
    "footer-leading-blank": [2, "always"],
}
