"""Service layer — operations returning ServiceResult.

Services translate domain outcomes (absent values, ValueError) into the
uniform ServiceResult envelope consumed by the CLI.
"""
