from setuptools import setup
from setuptools import find_packages

long_description = open('README.md').read()

setup(
    name="auris",
    version='0.1.0',
    description="RFC 3986 URI parsing with query string decomposition",
    python_requires='>=3.8',
    install_requires=[
        'lark',
        'dnspython'
    ],
    extras_require={
        'tests': [
            'pytest',
        ],
        'benchmark': [
            'rfc3986',
        ],
    },
    packages=find_packages(exclude=['tests', 'tests.*', 'benchmarks']),
    include_package_data=True,
    package_data={'auris': ['*.ini']},
    long_description=long_description,
    long_description_content_type='text/markdown'
)
