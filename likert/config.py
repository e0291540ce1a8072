from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = PROJECT_ROOT / "data"
RAW_DIR = DATA_DIR / "raw"

OUTPUTS_DIR = PROJECT_ROOT / "outputs"
LOGS_DIR = OUTPUTS_DIR / "logs"

# Response scales (most negative -> most positive)
AGREE_5 = [
    "Strongly disagree",
    "Disagree",
    "Neither agree nor disagree",
    "Agree",
    "Strongly agree",
]
AGREE_5_NEUTRAL = "Neither agree nor disagree"

# No midpoint: respondents are forced to lean one way.
AGREE_4 = ["Strongly disagree", "Disagree", "Agree", "Strongly agree"]

SCALES = {
    "agree5": (AGREE_5, AGREE_5_NEUTRAL),
    "agree4": (AGREE_4, None),
}
DEFAULT_SCALE = "agree5"

# Non-answers that count as missing rather than as a scale point.
MISSING_LABELS = ("", "no answer", "prefer not to say", "n/a", "na")
MISSING_CODES = (7, 9, 97, 99)

# Red (negative) -> grey (neutral) -> blue (positive), indexed by scale position.
DEFAULT_PALETTE_5 = ["#b2182b", "#ef8a62", "#d9d9d9", "#67a9cf", "#2166ac"]
DEFAULT_CMAP = "RdBu"

# In-memory sample dataset
SAMPLE_QUESTIONS = [
    "I enjoy my work",
    "My workload is manageable",
    "I feel valued by my team",
    "I would recommend this employer",
    "Meetings are a good use of time",
]
SAMPLE_N_RESPONDENTS = 300
SAMPLE_MISSING_RATE = 0.05
RANDOM_SEED = 2026

# Figures
FIGURE_DPI = 300
FIGSIZE = (10, 5)
