"""
Fixtura Testing - helpers for suites that define blueprints.

Usage with pytest (the plugin is registered automatically on install)::

    def test_posts(clean_blueprints):
        Post.define_blueprint(body=lambda r: setattr(r, "title", "x"))
        assert Post.make().title == "x"

Usage with unittest::

    class TestPosts(BlueprintTestCase):
        def test_make(self):
            ...

Components:
    - clean_blueprints:   pytest fixture clearing every registry around a test
    - fixtura_settings:   pytest fixture returning ``override_settings``
    - BlueprintTestCase:  unittest base class with the same reset behaviour
"""

from .cases import BlueprintTestCase

__all__ = ["BlueprintTestCase"]
