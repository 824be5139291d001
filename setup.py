from setuptools import find_packages, setup

package_name = 'nrg_tools'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    package_data={
        package_name: ['config/*.yaml'],
    },
    install_requires=['setuptools', 'numpy>=1.17.3', 'scipy', 'pyyaml'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='Maxime Lefevre',
    maintainer_email='maxime.lefevre@example.com',
    description='Conversions vecteur canonique, filtres passe-bas et saturations pour messages robot',
    license='Apache-2.0',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
        ],
    },
)
