from os.path import dirname, join
from setuptools import setup, find_namespace_packages

with open(join(dirname(__file__), 'headerstore/VERSION'), 'rb') as f:
    version = f.read().decode('ascii').strip()

install_requires = [
    "loguru>=0.6.0",
    "ujson",
    "w3lib>=1.17.0",
]
extras_require = {
    "test": ["pytest>=7.0", "multidict>=6.0"],
}

setup(
    name='headerstore',
    version=version,
    description='Case-insensitive, order-preserving HTTP headers container',
    long_description_content_type="text/markdown",
    long_description=open(join(dirname(__file__), 'README.md'), encoding='utf-8').read(),
    license="MIT",
    packages=find_namespace_packages(include=('headerstore', 'headerstore.*')),
    package_data={'headerstore': ['VERSION']},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    python_requires='>=3.9',
    install_requires=install_requires,
    extras_require=extras_require,
    keywords=[
        'http',
        'headers',
        'set-cookie',
        'case-insensitive',
    ]
)
