"""
Command handlers for the sitepush CLI.
"""
from .base_handler import ModeHandler
from .deploy_handler import DeployHandler
from .plan_handler import PlanHandler

__all__ = ['ModeHandler', 'DeployHandler', 'PlanHandler']
