"""Switch engine: turns an identity into git configuration writes."""

from .engine import plan_switch, switch
from .git import ConfigScope, GitConfig
from .plan import ConfigDirective, SwitchPlan, build_plan

__all__ = [
    "ConfigDirective",
    "ConfigScope",
    "GitConfig",
    "SwitchPlan",
    "build_plan",
    "plan_switch",
    "switch",
]
