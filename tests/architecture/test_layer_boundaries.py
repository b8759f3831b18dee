"""
Import-boundary enforcement for the invoice layers.

1. Kernel purity     -- invoice_kernel/** imports no engine, config or
                        service code.
2. Engine purity     -- invoice_engines/** may not import config, services
                        or YAML.
3. Engine no-impure  -- invoice_engines/** may not read the wall clock or
                        the environment.
4. Config direction  -- invoice_config/** may not import services.

All scanning is done via AST; these tests are read-only.
"""

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent.parent


def _python_files(package: str) -> list[Path]:
    """Return all .py files under a package, sorted for deterministic order."""
    return sorted((ROOT / package).rglob("*.py"))


def _parse(filepath: Path) -> ast.AST:
    return ast.parse(filepath.read_text(encoding="utf-8"), filename=str(filepath))


def _extract_imports(filepath: Path) -> list[tuple[int, str]]:
    """Return (line_number, module_string) for every import in a file."""
    results: list[tuple[int, str]] = []
    for node in ast.walk(_parse(filepath)):
        if isinstance(node, ast.Import):
            for alias in node.names:
                results.append((node.lineno, alias.name))
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                results.append((node.lineno, node.module))
    return results


def _extract_attribute_calls(filepath: Path) -> list[tuple[int, str]]:
    """Return (line_number, 'receiver.attr') for two-level attribute references."""
    results: list[tuple[int, str]] = []
    for node in ast.walk(_parse(filepath)):
        if isinstance(node, ast.Attribute) and isinstance(node.value, ast.Name):
            results.append((node.lineno, f"{node.value.id}.{node.attr}"))
    return results


def _matches_any(module: str, prefixes: tuple[str, ...]) -> bool:
    """True if module equals or is a child of any prefix."""
    return any(module == p or module.startswith(f"{p}.") for p in prefixes)


def _violations(package: str, forbidden: tuple[str, ...]) -> list[str]:
    found: list[str] = []
    for filepath in _python_files(package):
        for lineno, module in _extract_imports(filepath):
            if _matches_any(module, forbidden):
                rel = filepath.relative_to(ROOT)
                found.append(f"  {rel}:{lineno} imports '{module}'")
    return found


class TestKernelPurity:
    FORBIDDEN_PREFIXES = (
        "invoice_engines",
        "invoice_config",
        "invoice_services",
        "yaml",
    )

    def test_kernel_has_no_upward_imports(self):
        violations = _violations("invoice_kernel", self.FORBIDDEN_PREFIXES)
        assert not violations, (
            "Kernel boundary violation -- invoice_kernel/** must not import "
            "engines, config, services or YAML:\n" + "\n".join(violations)
        )


class TestEnginePurity:
    FORBIDDEN_PREFIXES = (
        "invoice_config",
        "invoice_services",
        "yaml",
    )

    def test_engine_files_have_no_forbidden_imports(self):
        violations = _violations("invoice_engines", self.FORBIDDEN_PREFIXES)
        assert not violations, (
            "Engine purity violation -- invoice_engines/** must not import "
            "config, services or YAML:\n" + "\n".join(violations)
        )


class TestEngineNoImpureFunctions:
    """invoice_engines/** may not read the wall clock or the environment.

    Allowed (observational-only): time.monotonic
    """

    FORBIDDEN_CALLS = frozenset({
        "datetime.now",
        "datetime.utcnow",
        "date.today",
        "time.time",
        "os.environ",
        "os.getenv",
    })

    def test_no_impure_calls_in_engines(self):
        violations: list[str] = []
        for filepath in _python_files("invoice_engines"):
            for lineno, qualname in _extract_attribute_calls(filepath):
                if qualname in self.FORBIDDEN_CALLS:
                    rel = filepath.relative_to(ROOT)
                    violations.append(f"  {rel}:{lineno} calls '{qualname}'")

        assert not violations, (
            "Engine impurity violation -- invoice_engines/** must take every "
            "timestamp from the order:\n" + "\n".join(violations)
        )


class TestConfigDirection:
    def test_config_does_not_import_services(self):
        violations = _violations("invoice_config", ("invoice_services",))
        assert not violations, "\n".join(violations)
