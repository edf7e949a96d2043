"""Benchmark reconciliation and edit sessions on large documents.

Reconciliation skips reused subtrees without descent, so a small edit in a
large document should cost roughly one walk over the top-level blocks.

Run with:
    pytest benchmarks/benchmark_reconcile.py -v --benchmark-only
"""

try:
    import pytest

    from gentree import EditSession, ReconcileConfig, dead_ranges, new_ranges, reconcile

    @pytest.mark.benchmark(group="reconcile")
    def test_benchmark_reconcile_scattered_edits(benchmark, wide_generations):
        """Benchmark reconcile for 200 replaced blocks out of 2000."""
        factory, previous, current = wide_generations
        patches = benchmark(reconcile, factory, previous, current)
        assert len(patches) == 400

    @pytest.mark.benchmark(group="reconcile")
    def test_benchmark_dead_ranges(benchmark, wide_generations):
        factory, previous, _ = wide_generations
        benchmark(dead_ranges, factory, previous)

    @pytest.mark.benchmark(group="reconcile")
    def test_benchmark_new_ranges(benchmark, wide_generations):
        factory, _, current = wide_generations
        benchmark(new_ranges, factory, current)

    @pytest.mark.benchmark(group="session")
    def test_benchmark_session_small_edit(benchmark, large_document):
        """Benchmark one 1-char edit (parse, reconcile, patch) in a large doc."""
        session = EditSession(large_document, config=ReconcileConfig(history_limit=2))
        edit_offset = min(5000, len(large_document) - 1)

        def edit():
            session.edit(edit_offset, edit_offset + 1, "x")

        benchmark(edit)

    @pytest.mark.benchmark(group="session")
    def test_benchmark_session_full_parse(benchmark, large_document):
        """Benchmark building a session from scratch (baseline for ratio)."""
        benchmark(EditSession, large_document)

except ImportError:
    pass  # pytest not available
