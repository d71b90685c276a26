"""Tests for the User aggregate."""

import pytest
from protean.exceptions import ValidationError
from storefront.user.events import UserDetailsUpdated, UserRegistered
from storefront.user.user import User


class TestUser:
    def test_register(self):
        user = User.register(store_id="store-001", email=" Asha@ChaiCorner.IN ", name="Asha Rao")

        assert user.email == "asha@chaicorner.in"
        assert user.is_admin is False
        assert [e for e in user._events if isinstance(e, UserRegistered)]

    @pytest.mark.parametrize("email", ["asha", "asha@", "@chaicorner.in", "asha rao@chaicorner.in", "asha@chaicorner"])
    def test_malformed_email_is_rejected(self, email):
        with pytest.raises(ValidationError):
            User.register(store_id="store-001", email=email)

    def test_update_details(self):
        user = User.register(store_id="store-001", email="asha@chaicorner.in")
        user.update_details(name="Asha R")

        assert user.name == "Asha R"
        assert user.email == "asha@chaicorner.in"
        assert [e for e in user._events if isinstance(e, UserDetailsUpdated)]
