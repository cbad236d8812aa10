from dataclasses import dataclass

@dataclass(slots=True)
class ComboState:
    """Running combo streak and score for the session."""
    combo_count: int = 0
    score: int = 0
    best_score: int = 0
