"""
Built-in templates for TypeScript query modules.

Rendered with trim_blocks/lstrip_blocks, so every block tag sits on a line of
its own. Generated code is indented with tabs.
"""

QUERY_TEMPLATE = """\
{% if has_parameters %}
type {{ name }}ParametersNamed = {
{% for parameter in named_parameters %}
{% if parameter.comment %}
\t{{ parameter.comment | doc_comment }}
{% endif %}
\t"{{ parameter.name }}": {{ parameter.type }};
{% endfor %}
};
type {{ name }}ParametersAnonymous = [
{% for parameter in anonymous_parameters %}
\t{{ parameter.name }}: {{ parameter.type }},
{% endfor %}
];
{% else %}
type {{ name }}ParametersNamed = Record<string, never>;
type {{ name }}ParametersAnonymous = [];
{% endif %}
{% for result in results %}
{% if result.members is none %}
type {{ name }}{{ result.suffix }} = never;
{% elif result.row_mode == "object" %}
type {{ name }}{{ result.suffix }} = {
{% for member in result.members %}
{% if member.comment %}
\t{{ member.comment | doc_comment }}
{% endif %}
\t"{{ member.name }}": {{ member.type }};
{% endfor %}
};
{% else %}
type {{ name }}{{ result.suffix }} = [
{% for member in result.members %}
\t{{ member.name }}: {{ member.type }},
{% endfor %}
];
{% endif %}
{% endfor %}

export const {{ value_name }}: Query<
\t"{{ result_mode }}",
\t"{{ connection_mode }}",
{% for type_name in type_names %}
\t{{ type_name }}{{ "," if not loop.last else "" }}
{% endfor %}
> = {
\tname: "{{ name }}",
\tquery: `-- name: {{ name }} {{ command_tag }}
{{ sql }}`,
\tbind: {
{% for binding in bindings %}
\t\t{{ binding.mode }}: (
\t\t\tparameters: {{ name }}{{ binding.parameters_suffix }}, configuration?: {{ configuration_type }}
\t\t):
{% for result in results %}
\t\t\t| BoundQuery<"{{ result_mode }}", "{{ connection_mode }}", {{ name }}{{ result.suffix }}>{{ " => {" if loop.last else "" }}
{% endfor %}
\t\t\treturn {
\t\t\t\tname: {{ value_name }}.name,
\t\t\t\tquery: {{ value_name }}.query,
{% if binding.by_name %}
\t\t\t\tparameters: [
{% for parameter in named_parameters %}
\t\t\t\t\tparameters["{{ parameter.name }}"],
{% endfor %}
\t\t\t\t],
{% else %}
\t\t\t\tparameters,
{% endif %}
\t\t\t\trowMode: configuration?.rowMode ?? "{{ default_row_mode }}",
\t\t\t\tintegerMode: configuration?.integerMode ?? "{{ default_integer_mode }}",
\t\t\t\tresultMode: "{{ result_mode }}",
\t\t\t\tconnectionMode: "{{ connection_mode }}",
\t\t\t};
\t\t},
{% endfor %}
\t}
} as const;
"""

FILE_TEMPLATE = """\
/* c8 ignore start */

import type { BoundQuery, Query } from "{{ types_path }}"

{% for block in blocks %}
{{ block }}
{% endfor %}
/* c8 ignore stop */
"""

TEMPLATES = {
    "query.ts": QUERY_TEMPLATE,
    "file.ts": FILE_TEMPLATE,
}
