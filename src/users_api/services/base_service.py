"""
Shared result type for the service layer
"""

from typing import Any, List, Optional
from dataclasses import dataclass


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Any]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None
