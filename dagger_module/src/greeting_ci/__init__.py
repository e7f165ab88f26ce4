"""Dagger CI module for the greeting service."""

from .main import GreetingCi as GreetingCi
