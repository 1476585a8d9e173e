"""
Alfresco Conversion Constants

Fixed identifiers shared by the content-model and share-module builders.
"""

# ---------- Process ids ----------

PROCESS_ID_PREFIX = "process"

# ---------- Content model ----------

CONTENT_MODEL_UNQUALIFIED_NAME = "model"
CONTENT_MODEL_NAMESPACE_URL = "http://www.alfresco.org/model/{0}/1.0"

DICTIONARY_NAMESPACE_URI = "http://www.alfresco.org/model/dictionary/1.0"
DICTIONARY_NAMESPACE_PREFIX = "d"
CONTENT_NAMESPACE_URI = "http://www.alfresco.org/model/content/1.0"
CONTENT_NAMESPACE_PREFIX = "cm"
BPM_NAMESPACE_URI = "http://www.alfresco.org/model/bpm/1.0"
BPM_NAMESPACE_PREFIX = "bpm"

# ---------- Artifact keys ----------

ARTIFACT_CONTENT_MODEL = "alfresco_content_model"
ARTIFACT_MODEL_NAMESPACE_PREFIX = "alfresco_content_model_namespace_prefix"
ARTIFACT_MODULE = "alfresco_share_module"

# ---------- Share module ----------

MODULE_ID = "kickstart_form_{0}"
DEFAULT_START_FORM_TYPE = "bpm:startTask"

EVALUATOR_STRING_COMPARE = "string-compare"
EVALUATOR_CONDITION_ACTIVITI = "activiti${0}"

# ---------- Workflow properties ----------

PROPERTY_WORKFLOW_DESCRIPTION = "bpm:workflowDescription"
PROPERTY_WORKFLOW_DUE_DATE = "bpm:workflowDueDate"
PROPERTY_WORKFLOW_PRIORITY = "bpm:workflowPriority"
PROPERTY_PACKAGEITEMS = "packageItems"
PROPERTY_SEND_EMAIL_NOTIFICATIONS = "bpm:sendEMailNotifications"

# ---------- Form sets ----------

FORM_SET_GENERAL = "general"
FORM_SET_INFO = "info"
FORM_SET_ASSIGNEE = "assignee"
FORM_SET_ITEMS = "items"
FORM_SET_OTHER = "other"

FORM_SET_APPEARANCE_TITLE = "title"
FORM_SET_TEMPLATE_2_COLUMN = "/org/alfresco/components/form/2-column-set.ftl"

FORM_SET_GENERAL_LABEL = "workflow.set.general"
FORM_SET_ASSIGNEE_LABEL = "workflow.set.assignee"
FORM_SET_ITEMS_LABEL = "workflow.set.items"
FORM_SET_OTHER_LABEL = "workflow.set.other"

# ---------- Form labels and controls ----------

FORM_WORKFLOW_DESCRIPTION_LABEL = "workflow.field.message"
FORM_WORKFLOW_DUE_DATE_LABEL = "workflow.field.due"
FORM_WORKFLOW_PRIORITY_LABEL = "workflow.field.priority"

FORM_MULTILINE_TEXT_TEMPLATE = "/org/alfresco/components/form/controls/textarea.ftl"
FORM_DATE_TEMPLATE = "/org/alfresco/components/form/controls/date.ftl"
FORM_PRIORITY_TEMPLATE = "/org/alfresco/components/form/controls/workflow/priority.ftl"
FORM_EMAIL_NOTIFICATION_TEMPLATE = "/org/alfresco/components/form/controls/workflow/email-notification.ftl"

FORM_DATE_PARAM_SHOW_TIME = "showTime"
FORM_DATE_PARAM_SUBMIT_TIME = "submitTime"
