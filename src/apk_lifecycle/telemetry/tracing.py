from __future__ import annotations

import os
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

_ANALYSIS_ID: ContextVar[str | None] = ContextVar("analysis_id", default=None)
_RUN_ID: ContextVar[str | None] = ContextVar("run_id", default=None)

_ATTR_TYPES = (str, bool, int, float)


def init_telemetry(settings: Dict[str, Any]) -> bool:
    """Install an OTLP tracer provider when ``telemetry.enabled`` and an endpoint are set."""
    conf = settings.get("telemetry", {}) if settings else {}
    if not conf.get("enabled"):
        return False
    endpoint = conf.get("otlp_endpoint") or os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT")
    if not endpoint:
        return False
    resource = Resource.create({"service.name": conf.get("service_name", "apk-lifecycle")})
    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=endpoint, insecure=conf.get("otlp_insecure", True))
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    return True


def set_run_context(analysis_id: str) -> str:
    run_id = uuid.uuid4().hex
    _ANALYSIS_ID.set(analysis_id)
    _RUN_ID.set(run_id)
    return run_id


@contextmanager
def span(name: str, **attrs: Any) -> Iterator[Any]:
    tracer = trace.get_tracer("apk_lifecycle")
    with tracer.start_as_current_span(name) as current:
        analysis_id = _ANALYSIS_ID.get()
        run_id = _RUN_ID.get()
        if analysis_id:
            current.set_attribute("analysis_id", analysis_id)
        if run_id:
            current.set_attribute("run_id", run_id)
        for key, value in attrs.items():
            if value is None:
                continue
            current.set_attribute(key, value if isinstance(value, _ATTR_TYPES) else str(value))
        yield current
