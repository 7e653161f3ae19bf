"""
Only the root tests directory carries an __init__.py; subdirectories are namespace packages (PEP 420).

It makes pytest treat tests/ as a package, so helpers import the same way everywhere
(`from tests.helpers.test_assistant import TEST_ASSISTANT`).
"""
