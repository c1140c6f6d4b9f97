# -*- coding: utf-8 -*-
"""Define project metadata
"""

__title__ = "shareitem"
__summary__ = "Shareable file records for peer-assisted local file distribution."
__url__ = "https://github.com/shareitem/shareitem"

__version__ = "0.1.0"

__install_requires__ = ["fs>=2.4"]
__tests_require__ = ["pytest", "tox"]

__author__ = "Shareitem Developers"
__email__ = "shareitem@example.org"

__license__ = "MIT License"
