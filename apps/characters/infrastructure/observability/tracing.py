"""OpenTelemetry Tracing - Characters Service."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

from apps.characters.setup.config import Settings

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None


def setup_tracing(settings: Settings) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        settings: 서비스 설정

    Returns:
        설정 여부
    """
    global _tracer_provider

    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled (OTEL_ENABLED=false)")
        return False

    resource = Resource.create(
        {
            "service.name": settings.service_name,
            "service.version": settings.app_version,
            "deployment.environment": settings.environment,
        }
    )
    provider = TracerProvider(
        resource=resource,
        sampler=TraceIdRatioBased(settings.otel_sampling_rate),
    )
    exporter = OTLPSpanExporter(
        endpoint=settings.otel_exporter_otlp_endpoint,
        insecure=True,
    )
    provider.add_span_processor(
        BatchSpanProcessor(
            exporter,
            max_queue_size=2048,
            max_export_batch_size=512,
            schedule_delay_millis=1000,
        )
    )
    trace.set_tracer_provider(provider)
    _tracer_provider = provider

    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "service": settings.service_name,
            "endpoint": settings.otel_exporter_otlp_endpoint,
            "sampling_rate": settings.otel_sampling_rate,
        },
    )
    return True


def instrument_fastapi(app: FastAPI, settings: Settings) -> None:
    """FastAPI 자동 계측."""
    if not settings.otel_enabled:
        return

    try:
        FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready")
        logger.info("FastAPI instrumentation enabled")
    except Exception as e:
        logger.error(f"Failed to instrument FastAPI: {e}")


def instrument_sqlalchemy(engine: AsyncEngine, settings: Settings) -> None:
    """SQLAlchemy 자동 계측 (DB 쿼리 추적)."""
    if not settings.otel_enabled:
        return

    try:
        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
        logger.info("SQLAlchemy instrumentation enabled")
    except Exception as e:
        logger.error(f"Failed to instrument SQLAlchemy: {e}")


def shutdown_tracing() -> None:
    """남은 span을 내보내고 트레이서를 종료합니다."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
