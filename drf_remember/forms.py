"""
Login form carrying the remember-me checkbox.
"""

from django import forms
from django.contrib.auth.forms import AuthenticationForm
from django.utils.translation import gettext_lazy as _

from drf_remember.session import REMEMBER_ME_KEY


class RememberMeAuthenticationForm(AuthenticationForm):
    """Django's AuthenticationForm with a "Remember me" checkbox."""

    remember_me = forms.BooleanField(label=_("Remember me"), required=False)

    def get_credentials(self) -> dict:
        """
        Credentials in the shape a cookie session accepts, so the checkbox
        becomes the session's remember-me flag.
        """
        return {
            "username": self.cleaned_data.get("username"),
            "password": self.cleaned_data.get("password"),
            REMEMBER_ME_KEY: self.cleaned_data.get(REMEMBER_ME_KEY, False),
        }
