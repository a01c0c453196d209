"""Shape selection for a resolved tenant.

Fetches the tenant's shapes, narrows them with an optional predicate
and lets the user pick one when more than one remains.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable

from crystallize_setup.core.models import Choice, SelectedShape, Shape, TenantContext
from crystallize_setup.core.protocols import (
    GraphQLExecutor,
    Notifier,
    Prompter,
    StatusFactory,
)
from crystallize_setup.core.tenant_info import fetch_tenant_info
from crystallize_setup.exceptions import NoShapesAvailableError, SelectionCancelledError

SHAPES_URL: str = "https://pim.crystallize.com/shapes"
DEFAULT_SHAPE_PROMPT: str = "Please select one of your shapes"
FETCH_STATUS_MESSAGE: str = "Getting tenant info"


def _no_status(_message: str) -> contextlib.nullcontext[None]:
    return contextlib.nullcontext()


def select_shape(
    client: GraphQLExecutor,
    context: TenantContext,
    prompter: Prompter,
    *,
    filter_shapes: Callable[[Shape], bool] | None = None,
    message: str | None = None,
    status: StatusFactory | None = None,
    notify: Notifier | None = None,
) -> SelectedShape:
    """Select one shape of ``context``'s tenant.

    Parameters
    ----------
    client:
        GraphQL transport used for the tenant info query.
    context:
        Resolved tenant context.
    prompter:
        Used only when more than one shape survives *filter_shapes*.
    filter_shapes:
        Optional predicate; shapes for which it returns ``False`` are
        not offered.
    message:
        Prompt text, defaults to :data:`DEFAULT_SHAPE_PROMPT`.
    status:
        Context-manager factory wrapped around the fetch, typically a
        spinner.
    notify:
        Receives ``Using shape "<name>"`` when the choice is automatic.

    Raises
    ------
    NoShapesAvailableError
        If no shape remains after filtering.  Raised before any prompt.
    SelectionCancelledError
        If the user aborts the prompt or picks an unknown id.
    """
    with (status or _no_status)(FETCH_STATUS_MESSAGE):
        info = fetch_tenant_info(client, context)

    shapes = list(info.shapes)
    if filter_shapes is not None:
        shapes = [shape for shape in shapes if filter_shapes(shape)]

    if not shapes:
        raise NoShapesAvailableError(
            f"You have no available shapes. Please create one at {SHAPES_URL}",
            hint=f"Create a shape at {SHAPES_URL} and run again.",
        )

    if len(shapes) == 1:
        selected = shapes[0]
        if notify is not None:
            notify(f'Using shape "{selected.name}"')
    else:
        shape_id = prompter.ask_choice(
            message or DEFAULT_SHAPE_PROMPT,
            [Choice(label=shape.name, value=shape.id) for shape in shapes],
        )
        selected = _find_by_id(shapes, shape_id)

    return SelectedShape(shape=selected, root_item_id=info.root_item_id)


def _find_by_id(shapes: list[Shape], shape_id: str) -> Shape:
    for shape in shapes:
        if shape.id == shape_id:
            return shape
    raise SelectionCancelledError(f'Selected shape "{shape_id}" is no longer available.')
