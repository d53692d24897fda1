"""Shared fixtures for the test suite."""

import pytest

from gql_polygen.core.parser import ParsedFile, parse_schema_string, platform_from_filename
from gql_polygen.core.transformer import transform_to_ir


@pytest.fixture
def ir_from():
    """Build a SchemaIR from SDL strings or (filename, sdl) pairs."""

    def _build(*documents):
        files = []
        for doc in documents:
            filename, sdl = doc if isinstance(doc, tuple) else ("schema.graphql", doc)
            files.append(
                ParsedFile(
                    filename=filename,
                    ast=parse_schema_string(sdl),
                    platform=platform_from_filename(filename),
                )
            )
        return transform_to_ir(files)

    return _build


@pytest.fixture
def schema_dir(tmp_path):
    """A schema directory with common, Android, iOS and web documents."""
    directory = tmp_path / "schema"
    directory.mkdir()
    (directory / "schema.graphql").write_text(
        """
        enum Status { ACTIVE DISABLED }

        type Profile {
          name: String!
          tags: [String!]
        }

        type Post { id: ID! title: String }
        type Comment { id: ID! body: String! }
        union SearchResult = Post | Comment

        extend type Query {
          profile(id: ID!): Profile
          search(term: String!, limit: Int = 10): [SearchResult!]!
        }
        """
    )
    (directory / "schema-android.graphql").write_text(
        """
        type DeviceInfoAndroid { apiLevel: Int! }

        extend type Mutation {
          syncDevice(force: Boolean): Boolean!
        }
        """
    )
    (directory / "schema-ios.graphql").write_text(
        """
        type DeviceInfoIOS { model: String! }

        extend type Query {
          deviceInfoIOS: DeviceInfoIOS
        }
        """
    )
    (directory / "schema-web.graphql").write_text(
        """
        type BrowserInfo { userAgent: String! }
        """
    )
    (directory / "README.md").write_text("not a schema")
    return directory
