"""
Forhandla
=========

HTTP content negotiation for `Accept`, `Accept-Language`, `Accept-Charset`
and `Accept-Encoding` headers, built on Werkzeug.
"""
from setuptools import setup, find_packages

extras_require = {
}

setup(
    name='forhandla',
    version='0.1.0',
    url='https://github.com/bwhmather/forhandla',
    license='BSD',
    author='Ben Mather',
    author_email='bwhmather@bwhmather.com',
    description='HTTP accept header content negotiation',
    long_description=__doc__,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    platforms='any',
    install_requires=[
        'werkzeug >= 2.0',
    ],
    tests_require=list(set(sum(
        (extras_require[extra] for extra in {}), []
    ))),
    extras_require=extras_require,
    packages=find_packages(),
    include_package_data=True,
    test_suite='forhandla.testsuite.suite',
)
