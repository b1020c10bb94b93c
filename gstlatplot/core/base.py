"""Core abstractions and base classes for gstlatplot."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List


@dataclass
class AnalysisResult:
    """Base class for analysis results."""

    name: str
    timestamp: datetime = field(default_factory=datetime.now)
    metrics: Dict[str, Any] = field(default_factory=dict)
    raw_data: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "name": self.name,
            "timestamp": self.timestamp.isoformat(),
            "metrics": self.metrics,
        }


class BaseAnalyzer(ABC):
    """Base class for all analyzers."""

    def __init__(self, name: str):
        """Initialize analyzer.

        Args:
            name: Name of the analyzer
        """
        self.name = name
        self.results: List[AnalysisResult] = []

    @abstractmethod
    def analyze(self, data: Any) -> AnalysisResult:
        """Perform analysis on data.

        Args:
            data: Input data to analyze

        Returns:
            AnalysisResult with metrics
        """
        pass

    def add_result(self, result: AnalysisResult) -> None:
        """Store analysis result."""
        self.results.append(result)

    def get_results(self) -> List[AnalysisResult]:
        """Get all stored results."""
        return self.results
