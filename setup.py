"""
Usage: 'pip install -e .[test]'

Installs the hireflow apps together with the django `config` project.
"""
from setuptools import setup, find_packages

from config import VERSION

# Format :: (1, 0, 0, 0, 'released')
VERSION_NAME = '.'.join(map(str, VERSION[:-1]))

INSTALL_REQUIRES = [
    'Django>=4.2,<6.0',
    'djangorestframework>=3.14',
    'djangorestframework-simplejwt>=5.3',
    'django-filter>=23.5',
    'django-cors-headers>=4.3',
    'django-redis>=5.4',
    'psycopg2-binary>=2.9',
    'python-dotenv>=1.0',
]

EXTRAS_REQUIRE = {
    'test': [
        'factory_boy>=3.3',
        'Faker>=20.0',
        'pytest>=7.4',
        'pytest-django>=4.7',
    ],
    'sentry': [
        'sentry-sdk>=1.39',
    ],
}

if __name__ == '__main__':
    setup(
        name='hireflow',
        version=VERSION_NAME,
        description='Agency recruitment pipeline with client shortlist feedback',
        packages=find_packages(include=['hireflow', 'hireflow.*', 'config']),
        py_modules=['manage'],
        python_requires='>=3.8',
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRE,
    )
