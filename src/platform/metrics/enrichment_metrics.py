from prometheus_client import Counter


class EnrichmentMetrics:
    """
    Telemetry Enrichment Metrics Collector

    Counts how many records went through the initializer chain and where
    enrichment degraded (a stage raised, or a single field was skipped).
    """

    def __init__(self):
        self.records_initialized = Counter(
            'telemetry_records_initialized_total',
            'Total telemetry records passed through the initializer chain',
            ['record_kind'],
        )

        self.initializer_failures = Counter(
            'telemetry_initializer_failures_total',
            'Initializer stages that raised while enriching a record',
            ['initializer'],
        )

        self.fields_skipped = Counter(
            'telemetry_field_skipped_total',
            'Fields left unset because their source value was malformed',
            ['field'],
        )

    # ========== Helper Methods ==========

    def record_initialized(self, *, record_kind: str):
        self.records_initialized.labels(record_kind=record_kind).inc()

    def record_initializer_failure(self, *, initializer: str):
        self.initializer_failures.labels(initializer=initializer).inc()

    def record_field_skipped(self, *, field: str):
        self.fields_skipped.labels(field=field).inc()


# Global metrics instance
metrics = EnrichmentMetrics()
