""" A setuptools-based setup module. """

from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='budget-tree', # Required

    # Versions should comply with PEP 440:
    # https://www.python.org/dev/peps/pep-0440/
    version='0.1.0',  # Required

    # A one-line description of what this project does.
    description='A hierarchical budget of capacity-limited accounts',  # Optional

    # An optional longer description of the project. PyPI uses this for the
    # body of text it shows users. This is the same as the README.
    long_description=long_description,  # Optional

    # The README is in Markdown. Valid values are:
    # text/plain, text/x-rst, and text/markdown
    long_description_content_type='text/markdown',  # Optional

    # My name.
    author='Christopher Scott',  # Optional

    # My email address.
    author_email='christopher@christopherscott.ca',  # Optional

    # For a list of valid classifiers, see https://pypi.org/classifiers/
    classifiers=[  # Optional
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 3 - Alpha',

        # Indicate who your project is intended for
        'Intended Audience :: Financial and Insurance Industry',
        'Topic :: Office/Business :: Financial',
        'Topic :: Software Development :: Libraries',

        # Pick your license as you wish
        'License :: Other/Proprietary License',

        'Programming Language :: Python :: 3',

        'Natural Language :: English'
    ],

    # This field adds keywords for your project which will appear on the
    # project page. What does your project relate to?
    keywords='finance budget envelope allocation',  # Optional

    python_requires='>=3.8',

    # You can just specify package directories manually here if your project is
    # simple. Or you can use find_packages().
    packages=find_packages(exclude=['contrib', 'docs', 'tests', 'tests.*']),  # Required

    # This field lists other packages that your project depends on to run.
    # Any package you put here will be installed by pip when your project is
    # installed, so they must be valid existing projects.
    install_requires=[
        'py-moneyed>=2.0',
        'python-dateutil>=2.7.3',
    ],  # Optional

    # List additional groups of dependencies here (e.g. development
    # dependencies).
    extras_require={  # Optional
        'test': ['pytest']
    },

    # Provides a command called `budget-tree` which executes the
    # function `main` from the `budget_tree.cli` module.
    entry_points={  # Optional
        'console_scripts': [
            'budget-tree=budget_tree.cli:main',
        ],
    },
)
