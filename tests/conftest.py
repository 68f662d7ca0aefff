"""Shared fixtures: a small content store on disk and an isolated build event log."""

from pathlib import Path

import pytest
from loguru import logger

from vitrine.contexts.presentation.site_config import load_site_config

POSTS = {
    "alpha": """---
title: Alpha Post
description: The first post
date: 2025-01-10
author: ammly
category: AI
tags: [python, ai, rag, kenya]
---
## Introduction

Some words here.

### Details

More words.
""",
    "beta": """---
title: Beta Post
description: Payments at scale
date: 2025-03-01
author: Ammly
category: Engineering
tags: [payments]
readingTime: 7 min read
---
## Setup

Body text.
""",
    "delta": """---
title: Delta Post
description: Operations notes
date: 2025-03-01
author: Ammly
category: engineering
tags: [Payments, ops]
---
Short body.
""",
    "draft": """---
title: Draft Post
description: Not ready yet
date: 2025-04-01
author: Ammly
category: AI
tags: [draft]
published: false
---
Work in progress.
""",
    "broken": """---
title: Broken Post
description: Missing its date
author: Ammly
category: AI
tags: [oops]
---
Never listed.
""",
}

EXPERIENCES = {
    "a-freelance": """---
title: Freelance Engineer
company: Independent
startDate: Jun 2020
endDate: Dec 2022
current: false
description: Client projects.
technologies: [Django, React]
---
""",
    "b-safaricom": """---
title: Software Engineer
company: Safaricom PLC
location: Nairobi, Kenya
startDate: Jan 2023
endDate: Present
current: true
description: Internal platforms.
achievements:
  - Shipped the thing
technologies: [Python, Go]
---
""",
    "c-intern": """---
title: Intern
company: University of Nairobi
startDate: 2019
endDate: 2020
current: false
description: Research support.
technologies: Python
---
""",
}

VENTURES = {
    "one": """---
title: Venture One
description: A live product
icon: wallet
status: live
technologies: [Python, Redis]
featured: true
order: 2
metrics:
  users: 100
  accuracy: 90%
  customLabel: Partners
  customValue: 4
---
## Overview

Live and growing.
""",
    "two": """---
title: Venture Two
description: Under construction
icon: book
status: building
technologies: [Python, FastAPI, PostgreSQL, Redis, Docker, Next.js]
order: 1
---
Being built.
""",
    "three": """---
title: Venture Three
description: Just an idea
icon: rocket-ship
status: concept
technologies: [Go]
---
""",
}


def write_items(root: Path, directory: str, items: dict) -> None:
    target = root / directory
    target.mkdir(parents=True, exist_ok=True)
    for slug, text in items.items():
        (target / f"{slug}.mdx").write_text(text, encoding="utf-8")


@pytest.fixture
def content_root(tmp_path):
    """Content store with valid, unpublished and invalid items in every category."""
    root = tmp_path / "content"
    write_items(root, "blog", POSTS)
    write_items(root, "experiences", EXPERIENCES)
    write_items(root, "ventures", VENTURES)
    (root / "blog" / "readme.txt").write_text("not content", encoding="utf-8")
    return root


@pytest.fixture
def events_file(tmp_path, monkeypatch):
    """Redirect the build event log into the test's temporary directory."""
    path = tmp_path / "logs" / "build_events.log"
    monkeypatch.setattr("vitrine.utils.event_logging.BUILD_EVENTS_FILE", path)
    return path


@pytest.fixture
def site_config(tmp_path):
    """Default site configuration (no site.yaml on disk)."""
    return load_site_config(tmp_path / "missing-site.yaml")


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test (CLI commands point them at captured streams)."""
    yield
    logger.remove()
