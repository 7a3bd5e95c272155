from simpleini import Ini, Options
from dataclasses import FrozenInstanceError
import pytest


class TestOptions:

    def test_defaults(self):
        options = Options()
        assert options.advanced is False
        assert options.multiline is False
        assert Ini().options == options

    def test_immutable(self):
        with pytest.raises(FrozenInstanceError):
            Options().advanced = True

    def test_update(self):
        options = Options()
        updated = options.update(multiline=True)
        assert updated == Options(multiline=True)
        assert options.multiline is False

    @pytest.mark.parametrize("advanced,multiline", [(True, False), (False, True)])
    def test_builder(self, advanced, multiline):
        options = (
            Options.builder().set_advanced(advanced).set_multiline(multiline).build()
        )
        assert options == Options(advanced=advanced, multiline=multiline)
