import setuptools

setuptools.setup(
    name="boreas",
    version="0.4",
    description="Invalidate CloudFront distributions and find them by CNAME",
    license="MIT",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "boto3-stubs[cloudfront]==1.35.1",
        "boto3==1.35.1",
        "click==8.1.7",
    ],
    extras_require={
        "test": [
            "pytest==8.3.3",
        ],
    },
    entry_points={
        "console_scripts": [
            "boreas=boreas.cli:invalidate_main",
            "boreas-find=boreas.cli:find_main",
        ],
    },
)
