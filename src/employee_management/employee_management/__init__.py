"""Employee Management package.

Organized by feature modules (auth, employees, attendance, salary) with a thin
Flask controller layer over service/repository layers.
"""
