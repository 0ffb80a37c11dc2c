"""
Core package for the retailer onboarding dashboard.

Submodules provide the retailer dataset, filtering, formatting, and user
interface rendering helpers that are orchestrated by the top-level `app.py`.
"""
