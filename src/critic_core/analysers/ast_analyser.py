"""Default module analyser based on the standard library ``ast`` module.

Metrics:
    complexity: Cyclomatic complexity summed over every function
        (1 + decision points each) plus decision points at module level.
    methods_count: Number of ``def`` and ``async def`` statements.
    smells:
        ComplexMethod: function complexity above ``complexity_threshold``.
        LongParameterList: more than ``max_parameters`` parameters,
            not counting a leading ``self`` or ``cls``.

Decision points are ``if``/``elif``, loops, ``except`` handlers, ternaries,
``assert``, ``match`` cases, comprehensions and their ``if`` filters, and
each extra operand of ``and``/``or``.
"""

from __future__ import annotations

import ast
from pathlib import Path

import structlog

from critic_core.analysers.base import module_name_for
from critic_core.critic_errors import ModuleAnalysisError
from critic_core.schemas.analysed_module import AnalysedModule, Smell

logger = structlog.get_logger(__name__)

DEFAULT_COMPLEXITY_THRESHOLD = 10
DEFAULT_MAX_PARAMETERS = 5

_BRANCH_NODES: tuple[type[ast.AST], ...] = (
    ast.If,
    ast.For,
    ast.AsyncFor,
    ast.While,
    ast.ExceptHandler,
    ast.IfExp,
    ast.Assert,
    ast.match_case,
)

_FunctionNode = ast.FunctionDef | ast.AsyncFunctionDef


def _decision_weight(node: ast.AST) -> int:
    if isinstance(node, _BRANCH_NODES):
        return 1
    if isinstance(node, ast.comprehension):
        return 1 + len(node.ifs)
    if isinstance(node, ast.BoolOp):
        return len(node.values) - 1
    return 0


class _ComplexityVisitor(ast.NodeVisitor):
    """Collects per-function complexity and module-level decision points."""

    def __init__(self) -> None:
        self.functions: list[tuple[_FunctionNode, int]] = []
        # frame 0 is module level; each function pushes its own frame
        self._frames: list[int] = [0]

    @property
    def module_level(self) -> int:
        return self._frames[0]

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:  # noqa: N802
        self._visit_function(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:  # noqa: N802
        self._visit_function(node)

    def _visit_function(self, node: _FunctionNode) -> None:
        self._frames.append(1)
        self.generic_visit(node)
        self.functions.append((node, self._frames.pop()))

    def generic_visit(self, node: ast.AST) -> None:
        self._frames[-1] += _decision_weight(node)
        super().generic_visit(node)


def _parameter_count(node: _FunctionNode) -> int:
    args = node.args
    positional = [*args.posonlyargs, *args.args]
    if positional and positional[0].arg in ("self", "cls"):
        positional = positional[1:]
    count = len(positional) + len(args.kwonlyargs)
    if args.vararg is not None:
        count += 1
    if args.kwarg is not None:
        count += 1
    return count


class AstModuleAnalyser:
    """Analyse Python modules by walking their syntax tree.

    Example:
        >>> analyser = AstModuleAnalyser(complexity_threshold=8)
        >>> module = analyser.analyse(Path("src/pkg/core.py"))
        >>> module.methods_count
        12
    """

    def __init__(
        self,
        complexity_threshold: int = DEFAULT_COMPLEXITY_THRESHOLD,
        max_parameters: int = DEFAULT_MAX_PARAMETERS,
    ) -> None:
        self.complexity_threshold = complexity_threshold
        self.max_parameters = max_parameters
        self._log = logger.bind(component="AstModuleAnalyser")

    def analyse(self, path: Path) -> AnalysedModule:
        """Analyse one Python source file.

        Args:
            path: Path of the file to analyse.

        Returns:
            AnalysedModule with complexity, method count and smells.

        Raises:
            ModuleAnalysisError: If the file cannot be read or parsed.
        """
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ModuleAnalysisError(path=str(path), reason=str(e)) from e

        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ModuleAnalysisError(
                path=str(path),
                reason=f"syntax error at line {e.lineno}: {e.msg}",
            ) from e

        visitor = _ComplexityVisitor()
        visitor.visit(tree)

        complexity = visitor.module_level + sum(score for _, score in visitor.functions)
        smells = self._find_smells(visitor.functions)

        module = AnalysedModule(
            name=module_name_for(path),
            path=str(path),
            smells=smells,
            complexity=float(complexity),
            methods_count=len(visitor.functions),
        )
        self._log.debug(
            "module_analysed",
            path=str(path),
            complexity=complexity,
            smells=len(smells),
            cost=module.cost,
            rating=str(module.rating),
        )
        return module

    def _find_smells(self, functions: list[tuple[_FunctionNode, int]]) -> list[Smell]:
        smells: list[Smell] = []
        for node, complexity in sorted(functions, key=lambda item: item[0].lineno):
            if complexity > self.complexity_threshold:
                smells.append(
                    Smell(
                        type="ComplexMethod",
                        context=node.name,
                        message=f"has a cyclomatic complexity of {complexity}",
                        line=node.lineno,
                    )
                )
            parameters = _parameter_count(node)
            if parameters > self.max_parameters:
                smells.append(
                    Smell(
                        type="LongParameterList",
                        context=node.name,
                        message=f"has {parameters} parameters",
                        line=node.lineno,
                    )
                )
        return smells


__all__ = [
    "AstModuleAnalyser",
    "DEFAULT_COMPLEXITY_THRESHOLD",
    "DEFAULT_MAX_PARAMETERS",
]
