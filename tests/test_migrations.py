"""
Shipped migrations build the same schema as the models.

Test settings disable migrations, so these tests load them from disk
directly.
"""
import pytest
from django.apps import apps
from django.db import models
from django.db.migrations.loader import MigrationLoader

LOCAL_APPS = ['users', 'products', 'cart', 'points', 'promotions', 'orders', 'reviews', 'common']


@pytest.fixture
def migration_state(settings):
    settings.MIGRATION_MODULES = {}
    loader = MigrationLoader(None, ignore_no_migrations=True)
    return loader, loader.project_state()


@pytest.mark.parametrize('label', LOCAL_APPS)
def test_app_ships_initial_migration(migration_state, label):
    loader, _ = migration_state
    assert (label, '0001_initial') in loader.disk_migrations


@pytest.mark.parametrize('label', LOCAL_APPS)
def test_migrations_match_models(migration_state, label):
    _, state = migration_state
    for model in apps.get_app_config(label).get_models():
        model_state = state.models[(label, model._meta.model_name)]
        fields = {f.name for f in model._meta.local_fields} | {f.name for f in model._meta.local_many_to_many}

        assert set(model_state.fields) == fields, model.__name__
        assert model_state.options['db_table'] == model._meta.db_table
        assert {i.name for i in model_state.options.get('indexes', [])} == {i.name for i in model._meta.indexes}
        assert {c.name for c in model_state.options.get('constraints', [])} == {
            c.name for c in model._meta.constraints
        }


def test_order_owner_is_protected(migration_state):
    _, state = migration_state
    user_field = state.models[('orders', 'order')].fields['user']
    assert user_field.remote_field.on_delete is models.PROTECT
