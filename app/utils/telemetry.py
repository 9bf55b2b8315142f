# app/utils/telemetry.py
from __future__ import annotations
import contextlib, time
from dataclasses import dataclass
from typing import Optional, AsyncIterator, Any

from fastapi import FastAPI
from opentelemetry import trace, metrics
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.requests import RequestsInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

from app.core.config import settings
import logging

logger = logging.getLogger("app.obs")


@dataclass
class ObsConfig:
    env: str = settings.ENV
    service_name: str = settings.OTEL_SERVICE_NAME or "uganda-insights-api"
    service_version: str = settings.OTEL_SERVICE_VERSION or "1.0.0"
    sample_ratio: str | float | None = settings.OTEL_SAMPLE_RATIO
    enable_metrics: str | bool | None = settings.OTEL_ENABLE_METRICS

    betterstack_host: Optional[str] = (
        settings.BETTERSTACK_HOST
    )  # e.g. https://in-otel.betterstack.com
    betterstack_api_key: Optional[str] = settings.BETTERSTACK_API_KEY


_cfg = ObsConfig()
_tracer = trace.get_tracer(__name__)
_meter = None
_step_hist = None
_label_counter = None


def _to_float(x, default=1.0) -> float:
    try:
        v = float(x)
    except (TypeError, ValueError):
        return default
    return max(0.0, min(1.0, v))


def _to_bool(x) -> bool:
    if isinstance(x, bool):
        return x
    return str(x).strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _join(base: str, path: str) -> str:
    base = base.rstrip("/")
    path = path if path.startswith("/") else "/" + path
    return base + path


def _build_resource() -> Resource:
    return Resource.create(
        {
            "service.name": _cfg.service_name,
            "service.version": _cfg.service_version,
            "deployment.environment": _cfg.env,
        }
    )


def _build_exporters(enable_metrics: bool):
    base = (_cfg.betterstack_host or "http://localhost:4318").rstrip("/")
    traces_ep = _join(base, "/v1/traces")
    metrics_ep = _join(base, "/metrics")
    headers = (
        {"Authorization": f"Bearer {_cfg.betterstack_api_key}"}
        if _cfg.betterstack_api_key
        else {}
    )
    span_exp = OTLPSpanExporter(endpoint=traces_ep, headers=headers)
    metric_exp = (
        OTLPMetricExporter(endpoint=metrics_ep, headers=headers)
        if enable_metrics
        else None
    )
    logger.info("OTEL traces_ep=%s metrics_ep=%s", traces_ep, metrics_ep)
    return span_exp, metric_exp


def setup_observability(app: FastAPI, *, sqlalchemy_engine=None) -> None:
    sample_ratio = _to_float(_cfg.sample_ratio, 1.0)
    enable_metrics = _to_bool(_cfg.enable_metrics)

    resource = _build_resource()
    tp = TracerProvider(
        resource=resource, sampler=ParentBased(TraceIdRatioBased(sample_ratio))
    )
    span_exporter, metric_exporter = _build_exporters(enable_metrics)
    tp.add_span_processor(BatchSpanProcessor(span_exporter))
    trace.set_tracer_provider(tp)

    if enable_metrics and metric_exporter:
        mp = MeterProvider(
            resource=resource,
            metric_readers=[PeriodicExportingMetricReader(metric_exporter)],
        )
        metrics.set_meter_provider(mp)

    global _meter, _step_hist, _label_counter
    _meter = metrics.get_meter("app.obs")
    if enable_metrics:
        _step_hist = _meter.create_histogram(
            "app.step.duration", unit="ms", description="Business step duration"
        )
        _label_counter = _meter.create_counter(
            "app.sentiment.labels_total", description="Analysed texts by label"
        )

    FastAPIInstrumentor.instrument_app(
        app,
        excluded_urls="^/health$|^/liveness$|^/readiness$|^/docs$",
    )
    RequestsInstrumentor().instrument()
    if sqlalchemy_engine is not None:
        SQLAlchemyInstrumentor().instrument(engine=sqlalchemy_engine)
    LoggingInstrumentor().instrument(set_logging_format=True)


# helpers
def _open_span(span, attrs: dict) -> None:
    for k, v in attrs.items():
        if v is not None:
            span.set_attribute(f"app.{k}", v)


def _fail_span(span, e: Exception) -> None:
    span.record_exception(e)
    span.set_attribute("app.success", False)
    span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))


@contextlib.asynccontextmanager
async def astep(name: str, **attrs: Any) -> AsyncIterator[None]:
    start = time.perf_counter()
    with _tracer.start_as_current_span(name) as span:
        _open_span(span, attrs)
        try:
            yield
            span.set_attribute("app.success", True)
        except Exception as e:
            _fail_span(span, e)
            raise
        finally:
            if _step_hist:
                _step_hist.record((time.perf_counter() - start) * 1000, {"step": name})


def count_label(label: str) -> None:
    if _label_counter:
        _label_counter.add(1, {"label": label})
