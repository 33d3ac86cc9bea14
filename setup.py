from setuptools import setup, find_packages

with open('README.rst') as f:
    readme = f.read()

with open('dockpurge/_version.py') as versionFile:
    exec(versionFile.read())

install_requires = ['PyYAML', 'tabulate']

setup(name='dockpurge',
      version=__version__,
      author='Turbulent inc.',
      author_email='oss@turbulent.ca',
      license='Apache License 2.0',
      long_description=readme,
      description='dockpurge - selective container, image and volume removal',
      install_requires=install_requires,
      extras_require={
          'test': ['pytest'],
      },
      test_suite='tests',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.8',
      entry_points={
          'console_scripts': [
              'dockpurge = dockpurge.cli:cli',
          ],
      })
