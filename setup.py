from setuptools import setup, find_packages
from glob import glob

package_name = 'husky_highlevel_controller'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        ('share/' + package_name + '/launch', glob('launch/*.py')),
        ('share/' + package_name + '/config', glob('config/*.yaml')),
    ],
    install_requires=['setuptools', 'numpy', 'transforms3d', 'tf-transformations'],
    zip_safe=True,
    maintainer='Husky Highlevel Controller Maintainers',
    maintainer_email='maintainers@example.com',
    description='Reactive controller steering the Husky towards the closest laser scan obstacle',
    license='GNU General Public License v3.0',
    tests_require=['pytest'],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'highlevel_controller = husky_highlevel_controller.nodes.highlevel_controller:main',
        ],
    },
)
