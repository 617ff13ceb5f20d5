from .department import Department
