from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_POINTER_STATE = "pointer_state"              # payload: position=(x,y)|None, pressed=bool, held=bool
EVENT_DRAG_STARTED = "drag_started"                # payload: cell=(x,y)
EVENT_GOOD_MOVE = "good_move"                      # payload: src=(x,y), dst=(x,y)
EVENT_BAD_MOVE = "bad_move"                        # payload: src=(x,y), dst=(x,y)


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_TILES_REMOVED = "tiles_removed"              # payload: positions=[(x,y,Tile),...], combo_count=int
EVENT_FALL_STEP = "fall_step"                      # payload: none
EVENT_ROW_SPAWNED = "row_spawned"                  # payload: row=int


# ============================================================================
# SCORING
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, combo_count=int
EVENT_BEST_SCORE_CHANGED = "best_score_changed"    # payload: best_score=int
