"""Shared fixtures for core unit tests"""

from datetime import datetime, timezone

import pytest

from mdmigrate.core.models import InferredMetadata


APPLE_PIE_MD = "# Apple Pie\n\nA classic dessert."

APPLE_PIE_MIGRATED = """\
---
title: "Apple Pie"
date: 2023-05-01T09:00:00.000Z
description: "A classic dessert."
tags: ["recipes"]
draft: false
categories: []
series: []
contributors: []
images: []
canonicalURL: ""
toc: true
---
# Apple Pie

A classic dessert."""


@pytest.fixture(name="apple_pie_meta")
def apple_pie_meta_fixture():
    return InferredMetadata(
        title="Apple Pie",
        date=datetime(2023, 5, 1, 9, tzinfo=timezone.utc),
        description="A classic dessert.",
        tags=["recipes"],
        slug="apple-pie",
    )


@pytest.fixture(name="apple_pie_md")
def apple_pie_md_fixture():
    return APPLE_PIE_MD


@pytest.fixture(name="apple_pie_migrated")
def apple_pie_migrated_fixture():
    return APPLE_PIE_MIGRATED
