"""A declarative command-line argument parsing engine. Describe your
options, positionals, and subcommands once, bind them to your own
variables, and get back a precise result for every argv.
"""

from setuptools import setup


__author__ = 'The argot developers'
__version__ = '0.1.0dev'
__license__ = 'BSD'


setup(name='argot',
      version=__version__,
      description="A declarative command-line argument parsing engine, with bound values and precise parse results.",
      long_description=__doc__,
      author=__author__,
      packages=['argot', 'argot.test'],
      include_package_data=True,
      zip_safe=False,
      license=__license__,
      platforms='any',
      install_requires=['boltons>=20.0.0'],
      extras_require={'testing': ['pytest']},
      classifiers=[
          'Topic :: Utilities',
          'Intended Audience :: Developers',
          'Topic :: Software Development :: Libraries',
          'Programming Language :: Python :: 3.8',
          'Programming Language :: Python :: 3.9',
          'Programming Language :: Python :: 3.10',
          'Programming Language :: Python :: 3.11',
          'Programming Language :: Python :: 3.12',
          'Programming Language :: Python :: 3 :: Only',
          'Programming Language :: Python :: Implementation :: CPython',
          'Programming Language :: Python :: Implementation :: PyPy', ]
      )

"""
A brief checklist for release:

* pytest
* git commit (if applicable)
* Bump setup.py version off of -dev
* git commit -a -m "bump version for vx.y.z release"
* rm -rf dist/*
* python setup.py sdist bdist_wheel
* twine upload dist/*
* git tag -a vx.y.z -m "brief summary"
* write CHANGELOG
* bump setup.py version onto n+1 dev
* git push

"""
