"""Skeleton web application: welcome page, health checks and mail diagnostics."""
