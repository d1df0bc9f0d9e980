# tests/__init__.py
"""
Test suite for the English inflection engine.

Organization:
- `test_plural`, `test_singular`, `test_agreement`: noun rules and count handling.
- `test_verbs`, `test_adjectives`, `test_articles`: the other rule chains.
- `test_numbers`, `test_currency`, `test_roman`: number formatting.
- `test_engine`, `test_concurrency`, `test_rwlock`: configuration state and locking.
- `test_text`, `test_case_rails`: possessives, lists, comparison, case helpers.
- `test_macros`: the inline interpreter and the template function map.
- `test_config`: settings, the package-level API and structured logging.
"""
