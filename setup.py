from setuptools import find_packages, setup

setup(
    name="git-worklog",
    version="0.4.0",
    description="Git hook that blocks commits until time is logged on the branch's Jira issue",
    packages=find_packages(include=["git_worklog", "git_worklog.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "jira",
        "requests",
        "python-dotenv",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
            "responses",
        ]
    },
    entry_points={
        'console_scripts': [
            'git-worklog=git_worklog.cli:main'
        ]
    }
)
