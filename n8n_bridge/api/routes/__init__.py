"""
API Routes Package
"""
from . import (
    health,
    n8n,
    workflows,
    executions,
)
