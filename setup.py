import io
import os

from setuptools import find_packages, setup


def read(*names, **kwargs):
    with io.open(
        os.path.join(os.path.dirname(__file__), *names),
        encoding=kwargs.get('encoding', 'utf8'),
    ) as fp:
        return fp.read()


readme = read('README.rst')
history = read('CHANGES.rst').replace('.. :changelog:', '')


setup(
    name='treezipper',
    version='0.1.0',
    license='Apache Software License',
    install_requires=[],
    extras_require={
        'test': ['pytest>=3.0'],
    },
    description=(
        'Persistent zippers for navigating and editing trees, lists '
        'and arrays.'
    ),
    long_description=readme + '\n\n' + history,
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    platforms='any',
    python_requires='>=3.6',
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Natural Language :: English',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
