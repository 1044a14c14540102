"""Localised message catalogue and lookup.

Messages are keyed by dotted identifiers and formatted with positional
parameters (``{0}``, ``{1}``...). Lookup falls back to the default locale and
finally to the key itself, so a missing translation never breaks a page.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

log = logging.getLogger(__name__)

CATALOGUES: dict[str, dict[str, str]] = {
    "en": {
        # Layout
        "app.name": "Todolist",
        "nav.home": "My todos",
        "nav.account": "My account",
        "nav.login": "Sign in",
        "nav.logout": "Sign out",
        "nav.register": "Register",
        "index.title": "Welcome",
        "index.lead": "Keep track of what you have to do.",
        # Forms
        "form.firstname": "First name",
        "form.lastname": "Last name",
        "form.email": "Email",
        "form.password": "Password",
        "form.confirmationPassword": "Confirm password",
        "form.currentPassword": "Current password",
        "form.newPassword": "New password",
        "form.submit": "Submit",
        "form.cancel": "Cancel",
        # Todo listing
        "todo.title": "Title",
        "todo.dueDate": "Due date",
        "todo.priority": "Priority",
        "todo.status": "Status",
        # Account links
        "account.link.update": "Update my personal information",
        "account.link.password": "Change my password",
        "account.link.delete": "Delete my account",
        "error.requestId": "Reference",
        # Registration
        "register.title": "Create an account",
        "register.error.global": "Please fill in all the fields with valid values.",
        "register.error.password.confirmation.error": (
            "The password confirmation does not match the password."
        ),
        "register.error.global.account": "An account already exists for the email {0}.",
        # Login
        "login.title": "Sign in",
        "login.error.global": "Invalid email or password.",
        # Home
        "home.title": "My todo list",
        "home.empty": "Nothing to do yet.",
        # Account
        "account.title": "My account",
        "account.counts.total": "Total",
        "account.counts.todo": "To do",
        "account.counts.done": "Done",
        "account.delete.title": "Delete my account",
        "account.delete.confirm": (
            "This will permanently remove your account and all of your todos."
        ),
        "account.password.title": "Change my password",
        "account.password.error.global": "Please fill in all the password fields.",
        "account.password.confirmation.error": (
            "The password confirmation does not match the new password."
        ),
        "account.password.error": "The current password is incorrect.",
        "account.update.title": "Update my personal information",
        "account.update.error.global": "Please fill in all the fields with valid values.",
        "account.email.alreadyUsed": "The email {0} is already used by another account.",
        # Errors
        "error.title": "Something went wrong",
    },
    "fr": {
        "app.name": "Todolist",
        "nav.home": "Mes tâches",
        "nav.account": "Mon compte",
        "nav.login": "Connexion",
        "nav.logout": "Déconnexion",
        "nav.register": "Inscription",
        "index.title": "Bienvenue",
        "index.lead": "Gardez une trace de ce que vous avez à faire.",
        "form.firstname": "Prénom",
        "form.lastname": "Nom",
        "form.email": "Email",
        "form.password": "Mot de passe",
        "form.confirmationPassword": "Confirmer le mot de passe",
        "form.currentPassword": "Mot de passe actuel",
        "form.newPassword": "Nouveau mot de passe",
        "form.submit": "Valider",
        "form.cancel": "Annuler",
        "todo.title": "Titre",
        "todo.dueDate": "Échéance",
        "todo.priority": "Priorité",
        "todo.status": "Statut",
        "account.link.update": "Modifier mes informations personnelles",
        "account.link.password": "Changer mon mot de passe",
        "account.link.delete": "Supprimer mon compte",
        "error.requestId": "Référence",
        "register.title": "Créer un compte",
        "register.error.global": "Veuillez remplir tous les champs avec des valeurs valides.",
        "register.error.password.confirmation.error": (
            "La confirmation ne correspond pas au mot de passe."
        ),
        "register.error.global.account": "Un compte existe déjà pour l'adresse {0}.",
        "login.title": "Connexion",
        "login.error.global": "Adresse email ou mot de passe invalide.",
        "home.title": "Mes tâches",
        "home.empty": "Rien à faire pour le moment.",
        "account.title": "Mon compte",
        "account.counts.total": "Total",
        "account.counts.todo": "À faire",
        "account.counts.done": "Terminées",
        "account.delete.title": "Supprimer mon compte",
        "account.delete.confirm": (
            "Votre compte et toutes vos tâches seront définitivement supprimés."
        ),
        "account.password.title": "Changer mon mot de passe",
        "account.password.error.global": "Veuillez remplir tous les champs du mot de passe.",
        "account.password.confirmation.error": (
            "La confirmation ne correspond pas au nouveau mot de passe."
        ),
        "account.password.error": "Le mot de passe actuel est incorrect.",
        "account.update.title": "Modifier mes informations personnelles",
        "account.update.error.global": "Veuillez remplir tous les champs avec des valeurs valides.",
        "account.email.alreadyUsed": "L'adresse {0} est déjà utilisée par un autre compte.",
        "error.title": "Une erreur est survenue",
    },
}


class MessageSource:
    """Resolve message keys against per-locale catalogues.

    :param catalogues: Mapping of language tag to ``{key: pattern}``.
    :type catalogues: Mapping[str, Mapping[str, str]]
    :param default_locale: Locale consulted when the requested one lacks a key.
    :type default_locale: str
    """

    def __init__(
        self,
        catalogues: Mapping[str, Mapping[str, str]] | None = None,
        *,
        default_locale: str = "en",
    ) -> None:
        self._catalogues = catalogues if catalogues is not None else CATALOGUES
        self.default_locale = default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._catalogues)

    def get_message(
        self, key: str, args: Sequence[Any] | None = None, locale: str | None = None
    ) -> str:
        """
        Return the message for ``key`` formatted with ``args``.

        :param key: Dotted message key.
        :param args: Positional parameters substituted into ``{0}``, ``{1}``...
        :param locale: Requested language tag; region suffixes are ignored.
        :returns: Formatted message, or ``key`` when no catalogue defines it.
        """
        pattern = self._lookup(key, locale)
        if pattern is None:
            log.warning("Missing message key=%s locale=%s", key, locale)
            return key
        return pattern.format(*(args or ()))

    def _lookup(self, key: str, locale: str | None) -> str | None:
        for tag in self._candidates(locale):
            catalogue = self._catalogues.get(tag)
            if catalogue is not None and key in catalogue:
                return catalogue[key]
        return None

    def _candidates(self, locale: str | None) -> list[str]:
        tags: list[str] = []
        if locale:
            normalised = locale.replace("_", "-").lower()
            tags.append(normalised)
            tags.append(normalised.split("-", 1)[0])
        tags.append(self.default_locale)
        return tags


__all__ = ["CATALOGUES", "MessageSource"]
