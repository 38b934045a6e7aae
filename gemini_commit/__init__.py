"""
Gemini Commit

AI-generated commit messages for staged git changes, via the Gemini API.
"""

__version__ = "1.0.0"

# Commit types the model is allowed to pick from
# Used by: prompts/builder.py, output (type colouring)
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, no code change',
    'refactor': 'Code restructuring without behavior change',
    'test': 'Adding or updating tests',
    'chore': 'Maintenance tasks, dependencies, tooling',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
