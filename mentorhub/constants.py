# Choices offered by the profile and mentor search forms. Stored values are
# free strings; these lists only drive the <select> options.
SKILL_OPTIONS = (
    "Marketing",
    "UI/UX",
    "Development",
    "Finance",
)

GOAL_OPTIONS = (
    "Improve product design",
    "Grow business",
    "Learn coding",
)
