"""
Praxis components.

Each component keeps its pure logic in ``component.py`` with data models in
``models.py`` and, where it talks to the outside world, protocol ports in
``ports.py``.
"""
