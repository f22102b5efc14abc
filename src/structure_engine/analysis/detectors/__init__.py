"""
Event detectors run once per candle by the engine's forward pass.

Order per index: swing update, sweep, imbalance, structure break, order block.
"""
from .swing_tracker import SwingTracker
from .liquidity_sweep_detector import LiquiditySweepDetector
from .imbalance_detector import ImbalanceDetector, gap_between
from .structure_break_detector import StructureBreakDetector
from .order_block_detector import OrderBlockDetector

__all__ = [
    "SwingTracker",
    "LiquiditySweepDetector",
    "ImbalanceDetector",
    "StructureBreakDetector",
    "OrderBlockDetector",
    "gap_between",
]
