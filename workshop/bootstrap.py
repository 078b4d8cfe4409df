"""Composition root.

Builds the event bus, the adapters and the use case handlers, and subscribes
the reactions before any request is handled.

Usage:
    from workshop.bootstrap import bootstrap

    workshop = bootstrap()
    result = await workshop.create_service_order.handle(
        CreateServiceOrderCommand(client_id="c-1", vehicle_id="v-1", actor=employee)
    )
    budget = await workshop.budget_repo.get_by_service_order_id(result.value.id)
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from workshop.application.budgets.handlers import (
    AddBudgetItemHandler,
    ApproveBudgetHandler,
    CreateBudgetHandler,
    MarkBudgetReceivedHandler,
    RejectBudgetHandler,
    SendBudgetHandler,
)
from workshop.application.event_handlers import (
    BudgetApprovedReaction,
    BudgetRejectedReaction,
    ServiceOrderApprovedReaction,
    ServiceOrderReceivedReaction,
)
from workshop.application.service_orders.handlers import (
    CreateServiceOrderHandler,
    UpdateServiceOrderStatusHandler,
)
from workshop.config import Settings, get_settings, setup_logging
from workshop.domain.budgets.repositories import BudgetItemRepository, BudgetRepository
from workshop.domain.clients.ports import ClientContact, ClientDirectory
from workshop.domain.service_orders.repositories import ServiceOrderRepository
from workshop.domain.shared import EventType
from workshop.domain.stock.ports import StockAvailabilityChecker, StockDecreaser, StockLevel
from workshop.infrastructure.clients import InMemoryClientDirectory
from workshop.infrastructure.messaging import EventBus
from workshop.infrastructure.persistence.in_memory import (
    InMemoryBudgetItemRepository,
    InMemoryBudgetRepository,
    InMemoryServiceOrderRepository,
)
from workshop.infrastructure.stock import InMemoryStockInventory

logger = logging.getLogger(__name__)


@dataclass
class Workshop:
    """Wired application: adapters, bus and handlers."""

    settings: Settings
    event_bus: EventBus

    service_order_repo: ServiceOrderRepository
    budget_repo: BudgetRepository
    budget_item_repo: BudgetItemRepository
    stock_checker: StockAvailabilityChecker
    stock_decreaser: StockDecreaser
    client_directory: ClientDirectory

    create_service_order: CreateServiceOrderHandler
    update_service_order_status: UpdateServiceOrderStatusHandler
    create_budget: CreateBudgetHandler
    add_budget_item: AddBudgetItemHandler
    send_budget: SendBudgetHandler
    approve_budget: ApproveBudgetHandler
    reject_budget: RejectBudgetHandler
    mark_budget_received: MarkBudgetReceivedHandler


def bootstrap(
    settings: Settings | None = None,
    stock_levels: Iterable[StockLevel] = (),
    contacts: Iterable[ClientContact] = (),
    configure_logging: bool = False,
) -> Workshop:
    """Wire the application on in-memory adapters.

    Args:
        settings: Settings to use (default: cached environment settings).
        stock_levels: Initial stock table, shared by the stock check and the
            stock movements.
        contacts: Known client contacts.
        configure_logging: Also run setup_logging (once per process).

    Returns:
        Workshop with every reaction already subscribed.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings)

    event_bus = EventBus()

    service_order_repo = InMemoryServiceOrderRepository()
    budget_repo = InMemoryBudgetRepository()
    budget_item_repo = InMemoryBudgetItemRepository()
    stock_inventory = InMemoryStockInventory(stock_levels)
    client_directory = InMemoryClientDirectory(contacts)

    create_budget = CreateBudgetHandler(budget_repo, event_bus)
    update_service_order_status = UpdateServiceOrderStatusHandler(service_order_repo, event_bus)

    workshop = Workshop(
        settings=settings,
        event_bus=event_bus,
        service_order_repo=service_order_repo,
        budget_repo=budget_repo,
        budget_item_repo=budget_item_repo,
        stock_checker=stock_inventory,
        stock_decreaser=stock_inventory,
        client_directory=client_directory,
        create_service_order=CreateServiceOrderHandler(service_order_repo, event_bus),
        update_service_order_status=update_service_order_status,
        create_budget=create_budget,
        add_budget_item=AddBudgetItemHandler(budget_repo, budget_item_repo),
        send_budget=SendBudgetHandler(budget_repo, client_directory, event_bus),
        approve_budget=ApproveBudgetHandler(
            budget_repo, budget_item_repo, stock_inventory, client_directory, event_bus
        ),
        reject_budget=RejectBudgetHandler(budget_repo, client_directory, event_bus),
        mark_budget_received=MarkBudgetReceivedHandler(budget_repo, event_bus),
    )

    event_bus.subscribe(
        EventType.SERVICE_ORDER_RECEIVED,
        ServiceOrderReceivedReaction(
            create_budget,
            budget_repo,
            validity_period=settings.budget_default_validity_days,
            delivery_method=settings.budget_default_delivery_method,
            note=settings.budget_auto_generated_note,
        ),
    )
    event_bus.subscribe(
        EventType.BUDGET_APPROVED,
        BudgetApprovedReaction(update_service_order_status, service_order_repo),
    )
    event_bus.subscribe(
        EventType.BUDGET_REJECTED,
        BudgetRejectedReaction(update_service_order_status, service_order_repo),
    )
    event_bus.subscribe(
        EventType.SERVICE_ORDER_APPROVED,
        ServiceOrderApprovedReaction(budget_repo, budget_item_repo, stock_inventory),
    )

    logger.info(
        "bootstrap.completed",
        extra={"environment": settings.environment, "app_name": settings.app_name},
    )
    return workshop
