import setuptools

setuptools.setup(
    name="static-site",
    version="0.1.0",

    description="CDK Python app deploying a static site behind CloudFront with a custom domain",
    author="author",

    packages=setuptools.find_packages(include=["infra", "infra.*"]),

    install_requires=[
        "aws-cdk-lib>=2.160.0,<3",
        "constructs>=10.0.0,<11",
    ],

    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },

    python_requires=">=3.9",

    classifiers=[
        "Development Status :: 4 - Beta",

        "Intended Audience :: Developers",

        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",

        "Topic :: Software Development :: Code Generators",
        "Topic :: Utilities",
    ],
)
