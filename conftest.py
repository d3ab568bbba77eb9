"""Root pytest configuration.

Lives at the repository root so ``fuel_tax_engine`` imports from a source
checkout without installing the package.
"""
