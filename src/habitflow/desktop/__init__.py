"""Flet desktop shell for the habit tracker."""
