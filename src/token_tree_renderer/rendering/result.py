"""Result object returned by ``Renderer.render_result``."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..shared import DiagnosticEntry, DiagnosticSeverity, PerformanceMetrics
from ..tree.nodes import node_to_dict
from .errors import RendererError


@dataclass
class RenderResult:
    """Outcome of one render call.

    On success ``tree`` holds the rendered top-level nodes. On failure
    ``tree`` is empty and ``error`` holds the terminal error; partial trees
    are never returned.
    """

    tree: List[Any] = field(default_factory=list)
    success: bool = True
    error: Optional[RendererError] = None
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    performance: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    correlation_id: Optional[str] = None

    def add_diagnostic(
        self,
        severity: DiagnosticSeverity,
        message: str,
        component: str,
        token_index: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add diagnostic entry to result."""
        self.diagnostics.append(
            DiagnosticEntry(
                severity=severity,
                message=message,
                component=component,
                token_index=token_index,
                details=details,
                correlation_id=self.correlation_id,
            )
        )

    def has_errors(self) -> bool:
        return any(d.severity == DiagnosticSeverity.ERROR for d in self.diagnostics)

    def unwrap(self) -> List[Any]:
        """Return the tree, re-raising the error of a failed render."""
        if self.error is not None:
            raise self.error
        return self.tree

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to a JSON-friendly dictionary."""
        result: Dict[str, Any] = {
            "success": self.success,
            "tree": node_to_dict(self.tree),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "performance": self.performance.to_dict(),
        }
        if self.error is not None:
            result["error"] = {
                "type": type(self.error).__name__,
                "message": str(self.error),
            }
        return result
