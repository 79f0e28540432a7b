"""Campus System package.

Feature modules (users, notifications, campus) with a thin Flask controller
layer on top of service/repository layers.
"""
