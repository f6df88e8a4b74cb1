# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

__version__ = "0.0.1"

install_requires = []

setup(
	name="heartbeat_monitor",
	version=__version__,
	description='Heartbeat Monitor',
	author='Venco',
	author_email='devs@venco.co',
	packages=find_packages(),
	include_package_data=True,
	install_requires=install_requires,
	extras_require={"test": ["pytest"]},
	python_requires=">=3.7",
)
