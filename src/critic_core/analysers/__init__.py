"""Module analysers.

Analysers build AnalysedModule records from discovered source paths.
AstModuleAnalyser is the default; any object implementing ModuleAnalyser
can be injected instead.
"""

from __future__ import annotations

from critic_core.analysers.ast_analyser import AstModuleAnalyser
from critic_core.analysers.base import ModuleAnalyser, module_name_for

__all__ = [
    "AstModuleAnalyser",
    "ModuleAnalyser",
    "module_name_for",
]
