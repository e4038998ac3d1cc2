"""
Automated players for Paddle Court
"""

from paddle_court.ai.autopilot import FollowBallAutopilot
from paddle_court.ai.observation import ObservationBuilder
from paddle_court.ai.observation import VectorObservationBuilder

__all__ = ["FollowBallAutopilot", "ObservationBuilder", "VectorObservationBuilder"]
