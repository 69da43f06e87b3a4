"""
primer: runnable lessons covering the basics of Python.

Every lesson is a small demo function registered with
:func:`primer.registry.register_lesson` together with the output it is
documented to print. The runner executes a lesson and checks that claim;
the ``primer`` CLI lists, shows, runs and verifies lessons.

Quick start::

    from primer.registry import get_lesson
    from primer.runner import run_lesson, scratch_context

    with scratch_context() as ctx:
        run = run_lesson(get_lesson("functions/closures_and_scope"), ctx)
    assert run.passed
"""

__version__ = "0.1.0"
