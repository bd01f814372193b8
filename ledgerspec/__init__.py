# MIT License
# Copyright (c) 2025 Hashborn

__version__ = "0.1.0"
