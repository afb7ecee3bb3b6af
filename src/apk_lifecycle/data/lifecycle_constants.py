"""Android framework base types and lifecycle method tables.

Base type names are resolved against the analysed hierarchy; a name that
does not resolve (older platform jar, no Google Play services, no AndroidX)
simply never matches.

Lifecycle tables hold canonical Soot subsignatures, one table per component
role that the Android framework drives through a managed lifecycle.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

from apk_lifecycle.models.component import ComponentRole

# =============================================================================
# Framework Base Types
# =============================================================================

APPLICATION_CLASS = "android.app.Application"
ACTIVITY_CLASS = "android.app.Activity"
MAP_ACTIVITY_CLASS = "com.google.android.maps.MapActivity"
SERVICE_CLASS = "android.app.Service"
FRAGMENT_CLASS = "android.app.Fragment"
SUPPORT_FRAGMENT_CLASS = "android.support.v4.app.Fragment"
ANDROIDX_FRAGMENT_CLASS = "androidx.fragment.app.Fragment"
BROADCAST_RECEIVER_CLASS = "android.content.BroadcastReceiver"
CONTENT_PROVIDER_CLASS = "android.content.ContentProvider"
GCM_BASE_INTENT_SERVICE_CLASS = "com.google.android.gcm.GCMBaseIntentService"
GCM_LISTENER_SERVICE_CLASS = "com.google.android.gms.gcm.GcmListenerService"
SERVICE_CONNECTION_INTERFACE = "android.content.ServiceConnection"

# Classification precedence. First match wins; several base types may map to
# the same role.
COMPONENT_BASE_TYPES: Tuple[Tuple[ComponentRole, str], ...] = (
    (ComponentRole.APPLICATION, APPLICATION_CLASS),
    (ComponentRole.ACTIVITY, ACTIVITY_CLASS),
    (ComponentRole.SERVICE, SERVICE_CLASS),
    (ComponentRole.FRAGMENT, FRAGMENT_CLASS),
    (ComponentRole.FRAGMENT, SUPPORT_FRAGMENT_CLASS),
    (ComponentRole.FRAGMENT, ANDROIDX_FRAGMENT_CLASS),
    (ComponentRole.BROADCAST_RECEIVER, BROADCAST_RECEIVER_CLASS),
    (ComponentRole.CONTENT_PROVIDER, CONTENT_PROVIDER_CLASS),
    (ComponentRole.GCM_BASE_INTENT_SERVICE, GCM_BASE_INTENT_SERVICE_CLASS),
    (ComponentRole.GCM_LISTENER_SERVICE, GCM_LISTENER_SERVICE_CLASS),
    (ComponentRole.SERVICE_CONNECTION, SERVICE_CONNECTION_INTERFACE),
    (ComponentRole.ACTIVITY, MAP_ACTIVITY_CLASS),
)

# =============================================================================
# Activity (android.app.Activity)
# =============================================================================

ACTIVITY_LIFECYCLE_METHODS: FrozenSet[str] = frozenset({
    "void onCreate(android.os.Bundle)",
    "void onStart()",
    "void onRestoreInstanceState(android.os.Bundle)",
    "void onPostCreate(android.os.Bundle)",
    "void onResume()",
    "void onPostResume()",
    "java.lang.CharSequence onCreateDescription()",
    "void onSaveInstanceState(android.os.Bundle)",
    "void onPause()",
    "void onStop()",
    "void onRestart()",
    "void onDestroy()",
    "void onAttachFragment(android.app.Fragment)",
})

# =============================================================================
# Service (android.app.Service)
# =============================================================================

SERVICE_LIFECYCLE_METHODS: FrozenSet[str] = frozenset({
    "void onCreate()",
    "void onStart(android.content.Intent,int)",
    "int onStartCommand(android.content.Intent,int,int)",
    "android.os.IBinder onBind(android.content.Intent)",
    "void onRebind(android.content.Intent)",
    "boolean onUnbind(android.content.Intent)",
    "void onDestroy()",
})

# =============================================================================
# Fragment (platform, support library and AndroidX)
# =============================================================================

FRAGMENT_LIFECYCLE_METHODS: FrozenSet[str] = frozenset({
    "void onCreate(android.os.Bundle)",
    "void onAttach(android.app.Activity)",
    "android.view.View onCreateView(android.view.LayoutInflater,android.view.ViewGroup,android.os.Bundle)",
    "void onViewCreated(android.view.View,android.os.Bundle)",
    "void onStart()",
    "void onActivityCreated(android.os.Bundle)",
    "void onViewStateRestored(android.app.Activity)",
    "void onResume()",
    "void onPause()",
    "void onStop()",
    "void onDestroyView()",
    "void onDestroy()",
    "void onDetach()",
    "void onSaveInstanceState(android.os.Bundle)",
})

# =============================================================================
# BroadcastReceiver / ContentProvider
# =============================================================================

BROADCAST_RECEIVER_LIFECYCLE_METHODS: FrozenSet[str] = frozenset({
    "void onReceive(android.content.Context,android.content.Intent)",
})

CONTENT_PROVIDER_LIFECYCLE_METHODS: FrozenSet[str] = frozenset({
    "boolean onCreate()",
    "android.net.Uri insert(android.net.Uri,android.content.ContentValues)",
    "android.database.Cursor query(android.net.Uri,java.lang.String[],java.lang.String,java.lang.String[],java.lang.String)",
    "int update(android.net.Uri,android.content.ContentValues,java.lang.String,java.lang.String[])",
    "int delete(android.net.Uri,java.lang.String,java.lang.String[])",
    "java.lang.String getType(android.net.Uri)",
})

# =============================================================================
# Google Cloud Messaging
# =============================================================================

GCM_INTENT_SERVICE_METHODS: FrozenSet[str] = frozenset({
    "void onDeletedMessages(android.content.Context,int)",
    "void onError(android.content.Context,java.lang.String)",
    "void onMessage(android.content.Context,android.content.Intent)",
    "boolean onRecoverableError(android.content.Context,java.lang.String)",
    "void onRegistered(android.content.Context,java.lang.String)",
    "void onUnregistered(android.content.Context,java.lang.String)",
})

GCM_LISTENER_SERVICE_METHODS: FrozenSet[str] = frozenset({
    "void onDeletedMessages()",
    "void onMessageReceived(java.lang.String,android.os.Bundle)",
    "void onMessageSent(java.lang.String)",
    "void onSendError(java.lang.String,java.lang.String)",
})

# =============================================================================
# ServiceConnection (android.content.ServiceConnection)
# =============================================================================

SERVICE_CONNECTION_METHODS: FrozenSet[str] = frozenset({
    "void onServiceConnected(android.content.ComponentName,android.os.IBinder)",
    "void onServiceDisconnected(android.content.ComponentName)",
})

# =============================================================================
# Master Lifecycle Map
# =============================================================================

# Application and Plain carry no table: their methods are never reported as
# lifecycle entry points.
LIFECYCLE_METHODS_MAP: Dict[ComponentRole, FrozenSet[str]] = {
    ComponentRole.ACTIVITY: ACTIVITY_LIFECYCLE_METHODS,
    ComponentRole.SERVICE: SERVICE_LIFECYCLE_METHODS,
    ComponentRole.FRAGMENT: FRAGMENT_LIFECYCLE_METHODS,
    ComponentRole.BROADCAST_RECEIVER: BROADCAST_RECEIVER_LIFECYCLE_METHODS,
    ComponentRole.CONTENT_PROVIDER: CONTENT_PROVIDER_LIFECYCLE_METHODS,
    ComponentRole.GCM_BASE_INTENT_SERVICE: GCM_INTENT_SERVICE_METHODS,
    ComponentRole.GCM_LISTENER_SERVICE: GCM_LISTENER_SERVICE_METHODS,
    ComponentRole.SERVICE_CONNECTION: SERVICE_CONNECTION_METHODS,
}

LIFECYCLE_ROLES: FrozenSet[ComponentRole] = frozenset(LIFECYCLE_METHODS_MAP)
