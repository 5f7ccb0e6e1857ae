"""
setup.py
"""

from setuptools import setup, find_packages

setup(
    name='MDUIFlow',
    version='1.0.0',
    description='Login flow step exposing SAML service provider MDUI after service registry authorization.',
    license='Apache 2.0',
    packages=find_packages('src/'),
    package_dir={'': 'src'},
    install_requires=[
        "pysaml2 >= 6.5.1",
        "PyYAML",
        "click",
        "importlib-metadata >= 1.7.0; python_version <= '3.8'",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    entry_points={
        "console_scripts": ["mduiflow-lookup=mduiflow.scripts.mdui_lookup:mdui_lookup"]
    }
)
