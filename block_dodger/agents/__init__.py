from .base import Agent
from .dodge_agent import DodgeAgent

__all__ = ['Agent', 'DodgeAgent']
