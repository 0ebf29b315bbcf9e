"""Usage reporting use cases"""
from .get_usage import GetUsage
from .dtos import UsageResponseDTO

__all__ = ["GetUsage", "UsageResponseDTO"]
