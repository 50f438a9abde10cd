"""
Tests for the application factory wiring.
"""

from ulpan_app.modules.exercises.session import SessionRegistry


def test_factory_loads_content_and_registry(app):
    pools = app.extensions['ulpan_pools']
    assert pools.words
    assert isinstance(app.extensions['ulpan_sessions'], SessionRegistry)
    assert app.config['TESTING'] is True


def test_practice_blueprint_is_mounted(app):
    rules = {rule.rule for rule in app.url_map.iter_rules()}
    assert '/api/practice/sessions' in rules
    assert '/api/practice/sessions/<session_id>/give-up' in rules
