"""Shared pytest fixtures and test helpers for kubeviz tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from kubeviz.config.settings import KubevizSettings
from kubeviz.domain.filter import filter_documents
from kubeviz.domain.resources import ConfigObject
from kubeviz.infrastructure.sources import parse_documents

DEPLOYMENT_YAML = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  namespace: shop
  labels:
    app: web
    tier: frontend
spec:
  replicas: 2
  template:
    spec:
      serviceAccountName: web-sa
      containers:
        - name: nginx
          image: nginx:1.25
        - name: sidecar
          image: envoy:1.29
      volumes:
        - name: config
          configMap:
            name: web-config
        - name: tls
          secret:
            secretName: web-tls
"""

SERVICE_YAML = """\
apiVersion: v1
kind: Service
metadata:
  name: web-svc
  namespace: shop
spec:
  selector:
    app: web
  ports:
    - port: 80
"""

CONFIGMAP_YAML = """\
apiVersion: v1
kind: ConfigMap
metadata:
  name: web-config
  namespace: shop
data:
  key: value
"""

SAMPLE_MANIFESTS = "---\n".join([DEPLOYMENT_YAML, SERVICE_YAML, CONFIGMAP_YAML])


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> KubevizSettings:
    """Default settings rooted at an empty temp directory."""
    return KubevizSettings.from_cli(project_root=tmp_path)


@pytest.fixture
def manifest_file(tmp_path: Path) -> Path:
    """The sample deployment + service + configmap written to disk."""
    path = tmp_path / "app.yaml"
    path.write_text(SAMPLE_MANIFESTS, encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no kubeviz.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("KUBEVIZ_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging_and_telemetry() -> Generator[None]:
    """Undo root logger and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("kubeviz")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)

    from kubeviz.services.telemetry import _current_span, disable_telemetry

    disable_telemetry()
    _current_span.set(None)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def load_objects(text: str) -> list[ConfigObject]:
    """Parse and filter manifest text."""
    return filter_documents(parse_documents(text))


def workload_yaml(
    name: str,
    *,
    kind: str = "Deployment",
    namespace: str | None = None,
    replicas: int | None = None,
    labels: dict[str, str] | None = None,
    containers: tuple[str, ...] = ("app",),
) -> str:
    """Build a minimal workload manifest."""
    lines = [f"kind: {kind}", "metadata:", f"  name: {name}"]
    if namespace:
        lines.append(f"  namespace: {namespace}")
    if labels:
        lines.append("  labels:")
        lines.extend(f"    {k}: {v}" for k, v in labels.items())
    lines.append("spec:")
    if replicas is not None:
        lines.append(f"  replicas: {replicas}")
    lines.extend(["  template:", "    spec:", "      containers:"])
    lines.extend(f"        - name: {c}" for c in containers)
    return "\n".join(lines) + "\n"
