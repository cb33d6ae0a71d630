"""PRANA tracker package.

Campus activity and wellness tracking backend, organized by feature modules
(students, admins, activities, health, dashboard) with a thin Flask controller
layer over service/repository layers.
"""

__version__ = "1.0.0"
