# morphology/__init__.py
"""
English morphology: immutable lookup tables and stateless rule functions.

Nothing in this package holds mutable state. Engine configuration (classical
modes, custom words, gender, article overrides) lives in `engines`, which
layers it on top of the rules defined here.
"""
