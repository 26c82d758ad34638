"""
Summary services.

Modules are imported directly (`services.summary_service`,
`services.threshold_evaluator`); the models module depends on the evaluator,
so nothing is re-exported here.
"""
