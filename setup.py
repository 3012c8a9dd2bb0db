from setuptools import setup, find_packages

setup(
    name='kubesail-config',
    version='0.1.0',
    packages=find_packages(),
    include_package_data=True,
    install_requires=[
        'typer',
        'fastapi',
        'uvicorn',
        'pydantic>=2',
        'pyyaml',
        'kubernetes',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
            'httpx',
            'jsonschema',
        ],
    },
    entry_points={
        'console_scripts': [
            'kubesail-config=kubesail_config.cli:app'
        ]
    },
    description='Register with KubeSail and merge the returned credentials into your kubeconfig',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
