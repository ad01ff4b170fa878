"""
Hardpass Shared Module
=======================

Configuration, logging, console presentation and result envelope models
shared by the hardpass front ends.
"""

from shared.config import HardpassConfig, PolicyConfig, get_config

__all__ = ["HardpassConfig", "PolicyConfig", "get_config"]
