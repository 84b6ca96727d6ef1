"""HR Portal package.

This package is organized by feature modules (companies, employees, documents)
with a thin Flask controller layer and service/repository layers behind it.
"""
