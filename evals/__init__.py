"""
Evaluation suite -- deterministic evals for rules, safety, intent, readability,
the validation pipeline, caching, evidence, and the HTTP API.

Run evals: pytest evals/ -v
Run one area: pytest evals/tasks/test_pipeline_evals.py -v
"""
