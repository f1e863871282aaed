"""bundlesplit AliasBinding Domain Model - A symbolic import bound to one module.

An AliasBinding is produced once per build by the environment selector and
handed explicitly to whatever rewrites imports, instead of relying on a
bundler's static alias feature.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from ..types import AliasName, BuildMode, ModulePath
from ..exceptions import ValidationError


@dataclass(frozen=True)
class AliasBinding:
    """Mapping from one fixed symbolic import name to exactly one module path.

    Attributes:
        alias: Symbolic import name (e.g. "@env")
        target: Concrete module path the alias resolves to
        mode: Build mode the target was selected for
    """

    alias: AliasName
    target: ModulePath
    mode: BuildMode

    def __post_init__(self):
        if not self.alias:
            raise ValidationError("alias", self.alias, "Alias cannot be empty")
        if not self.target:
            raise ValidationError("target", self.target, "Target path cannot be empty")

    def resolve(self, import_name: str) -> Optional[ModulePath]:
        """Rewrite an import name through this binding.

        Returns the bound target for the alias itself, the target joined with
        the remainder for sub-path imports ("@env/x"), and None otherwise.
        """
        if import_name == self.alias:
            return self.target
        prefix = f"{self.alias}/"
        if import_name.startswith(prefix):
            return ModulePath(f"{self.target}/{import_name[len(prefix):]}")
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alias": self.alias,
            "target": self.target,
            "mode": self.mode.value,
        }
